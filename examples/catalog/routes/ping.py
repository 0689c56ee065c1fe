"""Any method on /ping answers with the method it received."""


def default(request):
    return {"pong": request.method}
