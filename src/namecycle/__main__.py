from namecycle.cli.main_cli import main

main()
