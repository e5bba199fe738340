from django.urls import path
from . import views

urlpatterns = [
    path('create-payment', views.CreatePaymentView.as_view(), name='create_payment'),
    path('payu-success', views.payu_success, name='payu_success'),
    path('payu-failure', views.payu_failure, name='payu_failure'),
]
