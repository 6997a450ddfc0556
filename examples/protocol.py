class Network:
    def __init__(self):
        self.sent = []

    def send(self, data):
        self.sent.append(data)


class Protocol:
    def __init__(self, network):
        self._network = network

    def send_hello(self):
        self._network.send("hello")

    def send_bye(self):
        self._network.send("bye")
