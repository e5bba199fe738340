from django.urls import path
from . import views

urlpatterns = [
    path('download-registrations', views.DownloadRegistrationsView.as_view(), name='download_registrations'),
    path('create-influencer', views.CreateInfluencerView.as_view(), name='create_influencer'),
    path('influencer-stats', views.InfluencerStatsView.as_view(), name='influencer_stats'),
]
