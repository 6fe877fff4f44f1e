from tsubaki.http.error import HeadersSentError
from tsubaki.http.status import lookupReason, statusLine


class Response:
    def __init__(self, start_response, protocol=None, code=200, type="plain"):
        self.cookies = {}
        self.type = type
        self.headers = [('Content-Type', 'text/' + type), ('Cache-Control', 'no-cache')]
        self.code = code
        self.reason = lookupReason(code)
        self.protocol = protocol
        self.start_response = start_response
        self.content = ""
        self.sent = False

    def status(self, code, description=''):
        if self.sent:
            raise HeadersSentError(self, "status line")
        description = description or lookupReason(code)
        if not description:
            return
        self.code = code
        self.reason = description

    def statusLine(self):
        return statusLine(self.code, self.protocol, self.reason)

    def setHeader(self, name, value, replace=True):
        """Set a response header.
        name
            header name, matched case-insensitively when replacing.

        replace
            if True (the default) every previous value of the header is
            dropped. If False the header is appended, e.g. for Set-Cookie.
        """
        if self.sent:
            raise HeadersSentError(self, name)

        if name.lower() == 'content-type':
            self.type = "html" if "html" in value else self.type
        if replace:
            self.headers = [(k, v) for k, v in self.headers if k.lower() != name.lower()]
        self.headers.append((name, value))

    def getHeader(self, name):
        for k, v in self.headers:
            if k.lower() == name.lower():
                return v

    def ok(self):
        if self.sent:
            return
        self.start_response(f"{self.code} {self.reason}".strip(), self.headers)
        self.sent = True

    def encode(self):
        if self.type == "plain":
            return (f"{self.code} {self.reason} " + self.content).encode()
        return str(self.content).encode('utf-8')
