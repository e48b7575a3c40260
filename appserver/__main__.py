from appserver.main import main

main()
