from flask import Flask, render_template, current_app

from website.settings import load_website_settings
from website.client import StudentAgesClient, StudentAgesError, format_student_line


def create_app(settings=None):
    settings = settings or load_website_settings()

    app = Flask(__name__)
    app.extensions["student_ages_client"] = StudentAgesClient(
        settings["api_url"],
        settings["username"],
        settings["password"],
        timeout=settings["timeout"],
    )
    app.jinja_env.filters["student_line"] = format_student_line

    @app.route('/', methods=['GET'])
    def index():
        return render_template('index.html', students=None, error=None)

    @app.route('/', methods=['POST'])
    def list_students():
        """Fetch the list from the student API and render it"""
        client = current_app.extensions["student_ages_client"]
        try:
            students = client.fetch()
        except StudentAgesError as e:
            print(f"[WEBSITE] Could not list students: {e}")
            return render_template('index.html', students=None, error=str(e)), 502

        print(f"[WEBSITE] Listed {len(students)} students from {client.api_url}")
        return render_template('index.html', students=students, error=None)

    return app


def main():
    settings = load_website_settings()
    app = create_app(settings)
    print(f"Starting student list website on port {settings['port']}...")
    print(f"Student API: {settings['api_url']}")
    app.run(host=settings["host"], port=settings["port"])


if __name__ == "__main__":
    main()
