import ssl

from pyVim.connect import SmartConnect


def get_si(host: str, user: str, password: str, port: int = 443):
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return SmartConnect(
        host=host, user=user, pwd=password, port=port, sslContext=context
    )
