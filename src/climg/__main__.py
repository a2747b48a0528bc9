from climg.cli import main

main()
