import fastwsgi
import inspect

import os
import time

import re
import urllib.parse

#requests modules
import multipart as mp
from io import BytesIO

from configparser import ConfigParser

from tsubaki.http.response import Response
from tsubaki.http.die import ErrorResponder, DEFAULTS
from tsubaki.http.error import HTTPHalt

RE_URL = re.compile(r"[\&]")
RE_PARAM = re.compile(r"[\=]")

routes = {}


class BaseServer:
    def __init__(self, path, configFile, noStart=False):
        print("[INFO] starting Tsubaki server...")
        self.path = path

        self.importConf(configFile)

        if noStart:
            return

        self.start()

    #----------------------------HTTP SERVER------------------------------------
    def expose(func):
        def wrapper(self, *args, **kwargs):
            res = func(self, *args, **kwargs)

            self.response.ok()
            if res:
                return res.encode()
            else:
                return "".encode()

        name = func.__name__
        if func.__name__ == "index":
            name = "/"
        else:
            name = "/" + func.__name__

        routes[name] = {"params": inspect.signature(func).parameters, "target": wrapper}
        return wrapper

    def parseCookies(self, cookieStr):
        if not cookieStr:
            return {}
        cookies = {}
        for cookie in cookieStr.split(';'):
            key, _, value = cookie.partition('=')
            cookies[key.strip()] = value
        return cookies

    def parseArgs(self, environ):
        if environ.get('CONTENT_TYPE'):
            content_type = environ.get('CONTENT_TYPE').strip().split(";")
        else:
            content_type = ["text/html"]

        args = {}
        if environ.get('QUERY_STRING'):
            query = re.split(RE_URL, environ['QUERY_STRING'])
            for param in query:
                key, value = (re.split(RE_PARAM, param, maxsplit=1) + [""])[:2]
                if key:
                    args[key] = urllib.parse.unquote(value)
        if content_type[0] == "multipart/form-data":
            length = int(environ.get('CONTENT_LENGTH') or 0)
            body = environ['wsgi.input'].read(length)
            sep = content_type[1].split("=")[1].strip()
            body = mp.MultipartParser(BytesIO(body), sep.encode('utf-8'))
            for part in body.parts():
                args[part.name] = part.value
        return args

    def onrequest(self, environ, start_response):
        self.response = Response(start_response=start_response, protocol=environ.get('SERVER_PROTOCOL'))
        self.responder = ErrorResponder(self.response, defaults=self.errorDefaults())
        print("[INFO] Tsubaki - request received :'", str(environ['PATH_INFO']) + "'")
        target = environ['PATH_INFO']

        try:
            if not routes.get(target):
                self.die("Not Found", 404)

            self.response.cookies = self.parseCookies(environ.get('HTTP_COOKIE'))
            args = self.parseArgs(environ)
            if len(args) == 0:
                return routes[target]["target"](self)
            return routes[target]["target"](self, **args)
        except HTTPHalt as halt:
            halt.response.ok()
            return halt.response.encode()
        except Exception as e:
            print("[ERROR] Tsubaki - UNEXPECTED ERROR :", e)
            return self.unexpected(e)

    def unexpected(self, error):
        message = str(error) if self.debug else "Unexpected error"
        try:
            self.die(message, "Error", 500)
        except HTTPHalt as halt:
            halt.response.ok()
            return halt.response.encode()

    def die(self, message="", title="Error", options=None):
        self.responder.respond(message, title, options)

    def onStart(self):
        pass

    #--------------------------GENERAL USE METHODS------------------------------

    def importConf(self, configFile):
        self.config = ConfigParser()
        try:
            self.config.read(self.path + configFile)
            print("[INFO] Tsubaki - config at " + self.path + configFile + " loaded")
        except Exception:
            print("[ERROR] Tsubaki - Please create a config file")

    @property
    def debug(self):
        return self.config.getboolean("server", "DEBUG", fallback=False)

    def errorDefaults(self):
        return {
            "response": self.config.getint("errors", "RESPONSE", fallback=DEFAULTS["response"]),
            "back_link": self.config.getboolean("errors", "BACK_LINK", fallback=DEFAULTS["back_link"]),
        }

    def start(self):
        self.onStart()

        fastwsgi.server.nowait = 1
        fastwsgi.server.hook_sigint = 1

        print("[INFO] Tsubaki - server running on PID:", os.getpid())
        fastwsgi.server.init(app=self.onrequest, host=self.config.get('server', 'IP'),
                             port=int(self.config.get('server', 'PORT')))
        while True:
            code = fastwsgi.server.run()
            if code != 0:
                break
            time.sleep(0)
        self.close()

    def close(self):
        print("[INFO] SIGTERM/SIGINT received")
        fastwsgi.server.close()
        print("[INFO] SERVER STOPPED")
        exit()
