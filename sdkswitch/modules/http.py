"""HTTP requests and file downloads available to plugins."""

from __future__ import annotations

import posixpath
import sys
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, TextIO

import requests

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class HttpResponse:
    """The parts of an HTTP response handed back to plugins."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content_length: int = -1
    body: str = ""


class _Progress:
    """A one-line byte counter written to a text stream."""

    def __init__(self, stream: TextIO, description: str, total: int) -> None:
        self._stream = stream
        self._description = description
        self._total = total
        self._done = 0

    def update(self, count: int) -> None:
        self._done += count
        if self._total >= 0:
            line = f"\r{self._description} {self._done}/{self._total} bytes"
        else:
            line = f"\r{self._description} {self._done} bytes"
        self._stream.write(line)
        self._stream.flush()

    def finish(self) -> None:
        self._stream.write("\n")
        self._stream.flush()


def _content_length(response: requests.Response) -> int:
    value = response.headers.get("Content-Length")
    if value is None:
        return -1
    try:
        return int(value)
    except ValueError:
        return -1


def _first_values(response: requests.Response) -> dict[str, str]:
    return {str(key): str(value) for key, value in response.headers.items()}


class HttpModule:
    """An HTTP client for plugins, optionally sending everything through a proxy."""

    def __init__(self, proxy_url: Optional[str] = None, progress: Optional[TextIO] = None) -> None:
        self.session = requests.Session()
        self.proxy_url = proxy_url
        if proxy_url:
            self.session.proxies = {"http": proxy_url, "https": proxy_url}
        self._progress = progress

    def __enter__(self) -> HttpModule:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _headers(headers: Optional[Mapping[Any, Any]]) -> dict[str, str]:
        if not headers:
            return {}
        return {str(key): str(value) for key, value in headers.items()}

    def _send(
        self,
        method: str,
        url: Optional[str],
        headers: Optional[Mapping[Any, Any]],
        stream: bool = False,
    ) -> requests.Response:
        if url is None:
            raise ValueError("url is required")
        return self.session.request(method, str(url), headers=self._headers(headers), stream=stream)

    def get(self, url: Optional[str], headers: Optional[Mapping[Any, Any]] = None) -> HttpResponse:
        """Perform a GET request and return its status, headers and body."""
        with self._send("GET", url, headers) as response:
            body = response.content
            return HttpResponse(
                status_code=response.status_code,
                headers=_first_values(response),
                content_length=_content_length(response),
                body=body.decode("utf-8", errors="replace"),
            )

    def head(self, url: Optional[str], headers: Optional[Mapping[Any, Any]] = None) -> HttpResponse:
        """Perform a HEAD request and return its status and headers."""
        with self._send("HEAD", url, headers) as response:
            return HttpResponse(
                status_code=response.status_code,
                headers=_first_values(response),
                content_length=_content_length(response),
            )

    def download_file(
        self,
        url: Optional[str],
        path: str,
        headers: Optional[Mapping[Any, Any]] = None,
    ) -> None:
        """Stream the body fetched from ``url`` into the file at ``path``.

        Raises FileNotFoundError when the server answers 404.
        """
        if not path:
            raise ValueError("filepath is required")
        with self._send("GET", url, headers, stream=True) as response:
            if response.status_code == 404:
                raise FileNotFoundError("file not found")
            url_text = str(url)
            description = "Downloading..."
            if posixpath.splitext(url_text)[1]:
                description = posixpath.basename(url_text)
            stream = self._progress if self._progress is not None else sys.stderr
            progress = _Progress(stream, description, _content_length(response))
            with open(path, "wb") as out:
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    if chunk:
                        out.write(chunk)
                        progress.update(len(chunk))
            progress.finish()