from gotestdeps.cli import main

main()
