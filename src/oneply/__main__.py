from oneply.app import main

main()
