from node_lifecycle.cli.main import main

main()
