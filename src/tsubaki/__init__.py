r"""
------------------------------------------------------------------------------------------------------------------------

        _.-._                       Welcome to TSUBAKI
      .'  |  '.
     /  .-'-.  \            Tsubaki is a tiny WSGI toolkit built around one thing:
    |  (  *  )  |           stopping a request cleanly.
     \  '-.-'  /                - a status table
      '.  |  .'                 - a terminal error page responder (die)
        '-'-'                   - a minimal fastwsgi server to host it

________________________________________________________________________________________________________________________
"""

from tsubaki.http.die import ErrorResponder, ErrorRequest, die, normalize
from tsubaki.http.error import HTTPHalt, HeadersSentError
from tsubaki.http.response import Response
from tsubaki.http.status import HEADER_DESCRIPTIONS, lookupReason, protocolToken, statusLine
