"""Entry-Point für PyInstaller – startet den Hardlink Scanner als Konsolen-App.

Beim Doppelklick unter Windows schließt sich das Konsolenfenster sonst sofort,
daher wartet die gebündelte Version vor dem Beenden auf Enter.
"""

import sys

from hardlink_scanner.scan import main

if __name__ == "__main__":
    argv = sys.argv[1:]
    if getattr(sys, "frozen", False) and "--pause" not in argv:
        argv.append("--pause")
    sys.exit(main(argv))
