# -*- coding: utf-8 -*-

from RelayStJude.cli import run

if __name__ == "__main__":
    run()
