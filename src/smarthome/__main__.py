"""Entry point for 'python -m smarthome' command.

This module allows the SmartHome CLI to be invoked using
'python -m smarthome serve'.
"""

from smarthome.cli import main

if __name__ == "__main__":
    main()
