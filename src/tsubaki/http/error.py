class HTTPHalt(SystemExit):
    """Stops the current request: the response is already written.

    Raised by the error responder once the page has been rendered. BaseServer
    catches it and sends the buffered response, nothing else in the route runs.
    Left uncaught it ends the process like any SystemExit.
    """

    def __init__(self, response, code=None):
        super().__init__(code)
        self.response = response


class HeadersSentError(RuntimeError):
    def __init__(self, response, what="headers"):
        super().__init__(f"cannot emit {what}, headers already sent")
        self.response = response
