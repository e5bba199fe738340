from django.contrib import admin
from django.urls import include, path

from .views import health

urlpatterns = [
    path('', health, name='health'),
    path('django-admin/', admin.site.urls),
    path('', include('payu.urls')),
    path('admin/', include('admin_panel.urls')),
]
