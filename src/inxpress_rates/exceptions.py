class InXpressConnectorException(Exception):
    pass
