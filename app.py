# app.py
import logging
from flask import Flask, jsonify

from db import check_connection

logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s'
)

app = Flask(__name__)

@app.route("/")
def home():
    # DB settings come from the environment (docker compose provides them)
    try:
        check_connection()
        return "DB Connected!"
    except Exception as e:
        # Still a 200: callers have to look at the body
        logging.error(f"Database check failed: {e!r}")
        return f"Error: {e}"

@app.route("/health")
def health():
    return jsonify(status="ok")


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
