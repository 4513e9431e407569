from tubesage.cli import main

main()
