from admin_proxy.flask_app import main

if __name__ == "__main__":
    main()
