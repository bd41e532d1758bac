# Main.py
# Courbe lissée du solde — lanceur (fenêtre Tk ou export avec --export)

import sys

from balance_chart.app import main

if __name__ == "__main__":
    sys.exit(main())
