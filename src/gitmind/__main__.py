from gitmind.cli import main

main()
