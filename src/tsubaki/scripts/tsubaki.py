import argparse
import sys

from tsubaki.http.die import ErrorResponder
from tsubaki.http.error import HTTPHalt
from tsubaki.http.response import Response
from tsubaki.http.status import HEADER_DESCRIPTIONS


def list_codes(out=None):
    out = out or sys.stdout
    for code, phrase in HEADER_DESCRIPTIONS.items():
        out.write(f"{code} {phrase}\n")


def render(message, title="Error", response=None, back_link=False, protocol=None, out=None):
    """Run the built-in error page renderer and dump the raw HTTP response."""
    out = out or sys.stdout
    sent = {}

    def start_response(status, headers):
        sent["status"] = status
        sent["headers"] = headers

    res = Response(start_response=start_response, protocol=protocol)
    options = {"back_link": back_link}
    if response is not None:
        options["response"] = response

    try:
        ErrorResponder(res).respond(message, title, options)
    except HTTPHalt as halt:
        halt.response.ok()

    line = res.statusLine()
    if line:
        out.write(line + "\r\n")
    for name, value in sent["headers"]:
        out.write(f"{name}: {value}\r\n")
    out.write("\r\n")
    out.write(res.encode().decode('utf-8'))


def main(argv=None):
    parser = argparse.ArgumentParser(prog='tsubaki', description='Tsubaki error page tooling')
    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser('codes', help='List the known HTTP status codes')
    parser_render = subparsers.add_parser('render', help='Render an error page to stdout')
    parser_render.add_argument('message')
    parser_render.add_argument('--title', default='Error')
    parser_render.add_argument('--response', type=int)
    parser_render.add_argument('--back-link', action='store_true')
    parser_render.add_argument('--protocol', default='HTTP/1.1')

    args = parser.parse_args(argv)

    if args.command == 'codes':
        list_codes()
    elif args.command == 'render':
        render(args.message, title=args.title, response=args.response, back_link=args.back_link,
               protocol=args.protocol)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
