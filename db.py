# -*- coding: utf-8 -*-
import mysql.connector
import logging
import os

# ------------------ Database Config ------------------

# Environment variable -> mysql.connector.connect() keyword
DB_ENV_VARS = {
    "host": "DB_HOST",
    "database": "DB_NAME",
    "user": "DB_USER",
    "password": "DB_PASS",
}


def get_db_config():
    """Build the connect() kwargs from the environment. Raises KeyError if a variable is missing."""
    return {key: os.environ[name] for key, name in DB_ENV_VARS.items()}

# ------------------ Core Connect Logic ------------------

def check_connection():
    """Open a connection with the current environment and close it right away."""
    db_config = get_db_config()
    connection = mysql.connector.connect(**db_config)
    connection.close()
    logging.info(f"Connected to {db_config['database']} on {db_config['host']}")
