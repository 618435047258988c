# src/smartinit/version.py
VERSION = "0.1.0"
