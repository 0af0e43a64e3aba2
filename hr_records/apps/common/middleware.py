import logging

logger = logging.getLogger('django.server')


def get_client_ip(request):
    """
    Client IP address, honouring ``X-Forwarded-For`` from a reverse proxy.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class LogIPMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info("Incoming request: %s %s from IP: %s", request.method, request.path, get_client_ip(request))
        return self.get_response(request)
