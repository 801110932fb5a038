from boilerplate.cli import main

main()
