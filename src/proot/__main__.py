from proot.cli.cli import main

main()
