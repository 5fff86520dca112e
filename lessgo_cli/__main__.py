from lessgo_cli.cli import main

main()
