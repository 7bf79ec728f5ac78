from asset_fingerprint.cli.cli import app

if __name__ == "__main__":
    app(prog_name="fingerprint-assets")
