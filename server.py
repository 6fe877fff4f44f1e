from tsubaki.http.baseServer import BaseServer

from os.path import abspath, dirname
PATH = dirname(abspath(__file__))


class Hello(BaseServer):
    @BaseServer.expose
    def index(self):
        return "<h1>Hello</h1>"

    @BaseServer.expose
    def user(self, id=None):
        if not id:
            self.die("Please give a user id", "Missing parameter", {"response": 400, "back_link": True})
        self.die(f"No user <code>{id}</code> here.", 404)


if __name__ == "__main__":
    Hello(path=PATH, configFile="/server.ini")
