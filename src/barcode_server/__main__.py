from barcode_server.api.app import main

if __name__ == "__main__":
    main()
