from app import SETTINGS, app

if __name__ == '__main__':
    host = SETTINGS.host
    port = SETTINGS.port

    print(f"Starting RedNote scraper API on {host}:{port}")
    print(f"  Fetch timeout: {SETTINGS.fetcher.timeout}s, max redirects: {SETTINGS.fetcher.max_redirects}")
    print(f"\nDocs: http://localhost:{port}/docs")

    app.run(host=host, port=port, debug=SETTINGS.debug, threaded=True)
