"""Entry point for running the rotaplan web application."""

from rotaplan.web import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
