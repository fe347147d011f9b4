"""Launch the calculator window."""
import sys

from calculadora.app.main import main

if __name__ == "__main__":
    sys.exit(main())
