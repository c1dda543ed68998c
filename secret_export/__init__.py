"""
secret-service-export — dump a Secret Service keyring collection to Paw JSON or CSV.

Usage:
    secret-service-export                      # list collections
    secret-service-export -c Login -f csv      # export one collection
"""

__version__ = "0.1.0"
