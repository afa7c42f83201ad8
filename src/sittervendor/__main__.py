from sittervendor.cli import main

main()
