from openpaye_relay.main import main

main()
