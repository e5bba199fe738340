from django.http import HttpResponse


def health(request):
    return HttpResponse("Backend running", content_type="text/plain")
