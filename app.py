# app.py
import asyncio
import logging
from flask import Flask, request, jsonify
from dotenv import load_dotenv

# local dev .env loader (safe to keep; .env should not be committed)
load_dotenv()

from scraper.browser import fetch_rendered_text
from scraper.config import load_config
from scraper.errors import ScrapeFailed, ValidationError
from scraper.models import ScrapeRequest

# Flask app
app = Flask(__name__)
logging.basicConfig(level=logging.INFO)

# Config from environment (defaults: port 3000, 30s navigation timeout, headless)
app.config["SCRAPE_CONFIG"] = load_config()


@app.after_request
def add_cors_headers(response):
    # any origin may call us; only POST with a JSON body is expected
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "POST"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.route("/", methods=["GET"])
def health():
    return {
        "status": "ok",
        "service": "render-scrape",
        "note": "POST to /scrape with {url}"
    }, 200


@app.route("/scrape", methods=["POST"])
def scrape():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "invalid json"}), 400

    try:
        scrape_request = ScrapeRequest.from_payload(payload)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    app.logger.info("[Request] Scrape target: %s", scrape_request.url)

    try:
        # one event loop (and one browser) per request thread
        text = asyncio.run(fetch_rendered_text(scrape_request.url, app.config["SCRAPE_CONFIG"]))
    except ScrapeFailed as e:
        return jsonify({"error": str(e)}), 500

    return text, 200, {"Content-Type": "text/plain; charset=utf-8"}


if __name__ == "__main__":
    config = app.config["SCRAPE_CONFIG"]
    app.logger.info("Server listening on http://%s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port, threaded=True)
