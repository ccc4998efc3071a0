from gymtracker.cli.main import main

main()
