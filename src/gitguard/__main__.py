from gitguard.main import main

main()
