"""Terminal error pages.

``respond`` writes an HTTP status line, a ``text/html`` content type and a
small self-contained error document to the current response, then raises
:class:`~tsubaki.http.error.HTTPHalt` so nothing after it runs.

As a shorthand the status code may be passed as an integer in place of the
title (the default title then applies) or in place of the options::

    responder.respond("No such user", 404)
    responder.respond("No such user", "Error", 404)
    responder.respond("No such user", "Error", {"response": 404})
"""

import re

from tsubaki.http.error import HTTPHalt, HeadersSentError
from tsubaki.http.status import lookupReason

DEFAULT_TITLE = "Error"
DEFAULTS = {"response": 500, "back_link": False}
CONTENT_TYPE = "text/html; charset=utf-8"
BACK_LINK = "\n<p><a href='javascript:history.back()'>&laquo; Back</a></p>"

# pre-rendered messages open with a block element, inline tags still get a <p>
RE_MARKUP = re.compile(
    r"^\s*<(p|div|ul|ol|dl|h[1-6]|table|pre|blockquote|section|article|form|figure|hr)\b", re.IGNORECASE)

ERROR_PAGE = """<!DOCTYPE html>
<html>
<head>
	<meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
	<meta name="viewport" content="width=device-width">
	<meta name="robots" content="noindex,follow" />
	<title>{title}</title>
	<style type="text/css">
		html {{
			background: #f1f1f1;
		}}
		body {{
			background: #fff;
			color: #444;
			font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen-Sans, Ubuntu, Cantarell, "Helvetica Neue", sans-serif;
			margin: 2em auto;
			padding: 1em 2em;
			max-width: 700px;
			box-shadow: 0 1px 3px rgba(0,0,0,0.13);
		}}
		h1 {{
			border-bottom: 1px solid #dadada;
			clear: both;
			color: #666;
			font-size: 24px;
			margin: 30px 0 0 0;
			padding: 0 0 7px;
		}}
		#error-page {{
			margin-top: 50px;
		}}
		#error-page p {{
			font-size: 14px;
			line-height: 1.5;
			margin: 25px 0 20px;
		}}
		#error-page code {{
			font-family: Consolas, Monaco, monospace;
		}}
		ul li {{
			margin-bottom: 10px;
			font-size: 14px;
		}}
		a {{
			color: #0073aa;
		}}
		a:hover,
		a:active {{
			color: #00a0d2;
		}}
		a:focus {{
			color: #124964;
			box-shadow: 0 0 0 1px #5b9dd9, 0 0 2px 1px rgba(30, 140, 190, .8);
			outline: none;
		}}
	</style>
</head>
<body id="error-page">
	{message}
</body>
</html>
"""


def isErrorLike(message):
    if isinstance(message, (str, bytes)):
        return False
    return (isinstance(message, BaseException)
            or hasattr(message, "errorMessage") or hasattr(message, "errorTitle"))


def isMarkup(message):
    return bool(RE_MARKUP.match(message))


def capability(error, name):
    """Read an error capability, either a method or a plain attribute."""
    value = getattr(error, name, None)
    if callable(value):
        value = value()
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def asStatusCode(value, default):
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


class ErrorRequest:
    """The normalized (message, title, options) triple handed to a handler."""

    def __init__(self, message, title, options):
        self.message = message
        self.title = title
        self.options = options

    @property
    def response(self):
        return self.options["response"]

    @property
    def back_link(self):
        return bool(self.options.get("back_link"))

    @property
    def handler(self):
        return self.options.get("handler")

    def astuple(self):
        return self.message, self.title, self.options


def normalize(message="", title=DEFAULT_TITLE, options=None, defaults=None):
    defaults = DEFAULTS if defaults is None else {**DEFAULTS, **defaults}

    if isinstance(options, int) and not isinstance(options, bool):
        options = {"response": options}
    elif isinstance(title, int) and not isinstance(title, bool):
        options = {"response": title}
        title = DEFAULT_TITLE

    if options is None:
        options = {}
    if title is None:
        title = DEFAULT_TITLE

    merged = {**defaults, **options}
    merged["response"] = asStatusCode(merged["response"], defaults["response"])
    return ErrorRequest(message, str(title), merged)


class ErrorResponder:
    """Writes error pages to a Response and halts.

    response
        the host's Response object, status and headers are set on it and the
        rendered page becomes its content.

    handler
        a callable ``handler(message, title, options)`` replacing the built-in
        renderer for every call. A single call can still override it with the
        ``handler`` option.

    defaults
        default options merged under the caller's, e.g. from the [errors]
        section of the server config.
    """

    def __init__(self, response, handler=None, defaults=None):
        self.response = response
        self.handler = handler or self.defaultHandler
        self.defaults = defaults

    def respond(self, message="", title=DEFAULT_TITLE, options=None):
        request = normalize(message, title, options, self.defaults)
        handler = request.handler or self.handler
        handler(*request.astuple())
        # custom handlers are allowed to return
        raise HTTPHalt(self.response)

    def defaultHandler(self, message, title=DEFAULT_TITLE, options=None):
        options = {**DEFAULTS, **(options or {})}

        if isErrorLike(message):
            message, override = self.unpackError(message)
            if override and (not title or title == DEFAULT_TITLE):
                title = override

        self.statusHeader(options["response"])
        self.contentType(CONTENT_TYPE)

        message = self.renderMessage(message)
        if options.get("back_link"):
            message += BACK_LINK

        self.response.content = ERROR_PAGE.format(title=title, message=message)
        raise HTTPHalt(self.response)

    def statusHeader(self, code, description=''):
        if not description:
            description = lookupReason(code)
        if not description:
            return

        try:
            self.response.status(code, description)
        except HeadersSentError as e:
            print("[WARNING] Tsubaki -", e)

    def contentType(self, value):
        try:
            self.response.setHeader('Content-Type', value)
        except HeadersSentError as e:
            print("[WARNING] Tsubaki -", e)

    def unpackError(self, error):
        if isinstance(error, BaseException):
            return str(error), getattr(error, "title", None)

        return capability(error, "errorMessage") or "", capability(error, "errorTitle")

    def renderMessage(self, message):
        if message is None:
            return "<p></p>"
        if isinstance(message, bytes):
            message = message.decode('utf-8', 'replace')
        elif not isinstance(message, str):
            message = str(message)

        if isMarkup(message):
            return message
        return f"<p>{message}</p>"


def die(response, message="", title=DEFAULT_TITLE, options=None):
    ErrorResponder(response).respond(message, title, options)
