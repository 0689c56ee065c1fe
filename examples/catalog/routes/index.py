"""GET / -> service description."""


def get(request):
    return {"service": "catalog", "books": "/books"}
