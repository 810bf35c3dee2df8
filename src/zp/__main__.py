from zp.cli import main


main()
