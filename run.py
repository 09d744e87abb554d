"""Run the user directory gRPC server."""

from user_directory.application.server import main

if __name__ == "__main__":
    main()
