from filecount.cli import main

main()
