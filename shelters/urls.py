from django.urls import path

from . import views

app_name = 'shelters'

urlpatterns = [
    path('', views.shelter_list, name='shelter_list'),
    path('shelter/new/', views.ShelterCreateView.as_view(), name='shelter_create'),
    path('shelter/<int:pk>/', views.shelter_detail, name='shelter_detail'),
    path('shelter/<int:pk>/edit/', views.ShelterUpdateView.as_view(), name='shelter_update'),
    path('shelter/<int:pk>/delete/', views.ShelterDeleteView.as_view(), name='shelter_delete'),
    path('dogs/', views.DogListView.as_view(), name='dog_list'),
    path('dog/register/', views.DogCreateView.as_view(), name='dog_create'),
    path('dog/<int:pk>/', views.DogDetailView.as_view(), name='dog_detail'),
    path('dog/<int:pk>/edit/', views.DogUpdateView.as_view(), name='dog_update'),
    path('dog/<int:pk>/delete/', views.DogDeleteView.as_view(), name='dog_delete'),
    path('dog/<int:pk>/inquire/', views.dog_inquire, name='dog_inquire'),
    path('health/', views.health, name='health'),
]
