from lustre_dev.cli.main import main

main()
