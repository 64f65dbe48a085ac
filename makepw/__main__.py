from makepw.cli import main


main()
