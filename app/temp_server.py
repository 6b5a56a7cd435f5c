"""
Temporary file server for previewing the rendered portfolio locally
"""
import logging
import shutil
import socket
import tempfile
import threading
from functools import partial
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path

logger = logging.getLogger(__name__)


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)


class TempHTMLServer:
    def __init__(self):
        self.server = None
        self.server_thread = None
        self.temp_dir = None
        self.port = None
        self.filename = "index.html"
        self.is_running = False

    def start_server(self, html_content: str, filename: str = "index.html") -> str:
        """
        Start a temporary HTTP server and serve the HTML content.
        Returns the URL where the content can be accessed.
        Automatically stops any existing server before starting a new one.
        """
        if self.is_running:
            self.stop_server()

        self.temp_dir = tempfile.mkdtemp(prefix="folio2site-")
        self.filename = filename
        (Path(self.temp_dir) / filename).write_text(html_content, encoding="utf-8")

        self.port = self._find_free_port()
        handler = partial(_QuietHandler, directory=self.temp_dir)
        self.server = HTTPServer(("0.0.0.0", self.port), handler)

        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True

        url = self.get_current_url()
        logger.info("Preview at %s (network: http://%s:%s/%s)",
                    url, self._get_local_ip(), self.port, filename)
        return url

    def stop_server(self):
        """Stop the temporary server and clean up resources"""
        if self.server:
            try:
                self.server.shutdown()
                self.server.server_close()
            except OSError as e:
                logger.warning("Preview server did not shut down cleanly: %s", e)
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)
            self.server_thread = None

        if self.temp_dir:
            shutil.rmtree(self.temp_dir, ignore_errors=True)
            self.temp_dir = None

        self.is_running = False

    def update_content(self, html_content: str, filename: str = "index.html") -> str:
        """
        Replace the served page without changing port.
        If no server is running, starts a new one.
        """
        if not self.is_running or not self.temp_dir:
            return self.start_server(html_content, filename)

        self.filename = filename
        (Path(self.temp_dir) / filename).write_text(html_content, encoding="utf-8")
        return self.get_current_url()

    def is_server_running(self) -> bool:
        return self.is_running and self.server is not None

    def get_current_url(self):
        """Get the current server URL if running, None otherwise"""
        if self.is_server_running():
            return f"http://localhost:{self.port}/{self.filename}"
        return None

    def _find_free_port(self) -> int:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("", 0))
            return s.getsockname()[1]

    def _get_local_ip(self):
        """Get the local network IP address of the machine."""
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            # Doesn't have to be reachable
            s.connect(("8.8.8.8", 80))
            ip = s.getsockname()[0]
        except OSError:
            ip = "127.0.0.1"
        finally:
            s.close()
        return ip

    def __del__(self):
        self.stop_server()


# Global instance shared by the CLI and the streamlit app
_temp_server = TempHTMLServer()


def serve_html_temporarily(html_content: str, filename: str = "index.html") -> str:
    """
    Updates existing server content if running, otherwise starts a new server.
    Returns URL where the content can be accessed.
    """
    return _temp_server.update_content(html_content, filename)


def cleanup_temp_server():
    _temp_server.stop_server()


def get_server_status() -> dict:
    return {
        "is_running": _temp_server.is_server_running(),
        "url": _temp_server.get_current_url(),
        "port": _temp_server.port if _temp_server.is_running else None,
    }
