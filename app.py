from flask import Flask, Response, abort, request, send_from_directory
import logging
import os

from werkzeug.exceptions import NotFound
from werkzeug.utils import safe_join

from file_kinds import FileKind, classify

logger = logging.getLogger(__name__)

INDEX = "index.html"

# Listens on the notification stream and reloads the page on "reload"
CLIENT_SCRIPT = """
<script>
(function () {
    var events = new EventSource("/__events");
    events.addEventListener("reload", function () {
        window.location.reload();
    });
    events.addEventListener("error", function (event) {
        if (event.data) {
            console.log(event.data);
        }
    });
})();
</script>
"""


def inject_client_script(html):
    return html + CLIENT_SCRIPT.encode("utf-8")


def inject_compiled_styles(html, css):
    return html + ("<style>%s</style>\n" % css).encode("utf-8")


def create_app(compiler, channel, root="."):
    app = Flask(__name__, static_folder=None)
    app.config["PROJECT_ROOT"] = os.path.abspath(root)

    def serve_file(path):
        project_root = app.config["PROJECT_ROOT"]

        if classify(path) is not FileKind.MARKUP:
            response = send_from_directory(project_root, path)
            logger.info("200 /%s", path)
            return response

        file_path = safe_join(project_root, path)
        if file_path is None or not os.path.isfile(file_path):
            abort(404)

        # bytes in, bytes out: the page keeps whatever encoding it was saved in
        with open(file_path, "rb") as f:
            html = f.read()

        html = inject_client_script(html)
        html = inject_compiled_styles(html, compiler.css)
        logger.info("200 /%s", path)
        return Response(html, mimetype="text/html")

    @app.route("/")
    def index():
        return serve_file(INDEX)

    @app.route("/favicon.ico")
    def favicon():
        return ""

    @app.route("/__events")
    def events():
        return Response(
            channel.stream(),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    @app.route("/<path:path>")
    def project_files(path):
        return serve_file(path)

    @app.errorhandler(NotFound)
    def not_found(e):
        logger.error("404 %s", request.path)
        return Response("404", status=404, mimetype="text/plain")

    return app
