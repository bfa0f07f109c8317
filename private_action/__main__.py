from private_action.cli import main

main()
