"""
Shelter and dog views.

Read-only pages are open to everyone; creating, editing and deleting
records requires a logged-in user.
"""

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import DatabaseError, connection
from django.db.models import ProtectedError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.views import generic
from django.views.decorators.http import require_GET, require_POST

from .cache import shelter_dog_counts
from .forms import AdoptionInquiryForm, DogForm, ShelterForm
from .models import AdoptionInquiry, Dog, Shelter
from .placeholders import attach_placeholder_photo
from .search import build_dog_search_filter

logger = logging.getLogger(__name__)


def shelter_list(request):
    shelters = list(Shelter.objects.all())
    counts = shelter_dog_counts()
    for shelter in shelters:
        shelter.dog_count = counts.get(shelter.id, 0)
    context = {'shelters': shelters}
    return render(request, 'shelters/shelter_list.html', context)


def shelter_detail(request, pk):
    shelter = get_object_or_404(Shelter, pk=pk)
    context = {'shelter': shelter, 'dogs': shelter.dogs.all()}
    return render(request, 'shelters/shelter_detail.html', context)


class ShelterCreateView(LoginRequiredMixin, generic.CreateView):
    model = Shelter
    form_class = ShelterForm

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info("Shelter %s created by %s", self.object.pk, self.request.user)
        messages.success(self.request, f"Shelter '{self.object}' added.")
        return response


class ShelterUpdateView(LoginRequiredMixin, generic.UpdateView):
    model = Shelter
    form_class = ShelterForm

    def form_valid(self, form):
        response = super().form_valid(form)
        messages.success(self.request, f"Shelter '{self.object}' updated.")
        return response


class ShelterDeleteView(LoginRequiredMixin, generic.DeleteView):
    model = Shelter
    success_url = reverse_lazy('shelters:shelter_list')

    def form_valid(self, form):
        name = str(self.object)
        try:
            response = super().form_valid(form)
        except ProtectedError:
            logger.warning("Refused to delete shelter %s: it still houses dogs", self.object.pk)
            messages.error(
                self.request,
                f"'{name}' still houses dogs. Move or remove them before deleting the shelter.",
            )
            return redirect(self.object)
        logger.info("Shelter %s deleted by %s", name, self.request.user)
        messages.success(self.request, f"Shelter '{name}' deleted.")
        return response


class DogListView(generic.ListView):
    model = Dog

    def get_paginate_by(self, queryset):
        return settings.DOGS_PER_PAGE

    def get_queryset(self):
        query = self.request.GET.get('q', '')
        return Dog.objects.select_related('shelter').filter(build_dog_search_filter(query))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['q'] = self.request.GET.get('q', '')
        return context


class DogDetailView(generic.DetailView):
    model = Dog

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault('inquiry_form', AdoptionInquiryForm())
        return context


class DogCreateView(LoginRequiredMixin, generic.CreateView):
    model = Dog
    form_class = DogForm

    def get_initial(self):
        initial = super().get_initial()
        try:
            shelter_id = int(self.request.GET.get('shelter', ''))
        except ValueError:
            return initial
        if Shelter.objects.filter(pk=shelter_id).exists():
            initial['shelter'] = shelter_id
        return initial

    def form_valid(self, form):
        response = super().form_valid(form)
        if not self.object.photo:
            try:
                attach_placeholder_photo(self.object)
            except OSError:
                messages.warning(self.request, "The dog was saved, but no placeholder photo could be created.")
        logger.info("Dog %s registered at shelter %s", self.object.pk, self.object.shelter_id)
        messages.success(self.request, f"{self.object} has been registered.")
        return response


class DogUpdateView(LoginRequiredMixin, generic.UpdateView):
    model = Dog
    form_class = DogForm

    def form_valid(self, form):
        response = super().form_valid(form)
        messages.success(self.request, f"{self.object} has been updated.")
        return response


class DogDeleteView(LoginRequiredMixin, generic.DeleteView):
    model = Dog

    def get_success_url(self):
        return reverse('shelters:shelter_detail', args=[self.object.shelter_id])

    def form_valid(self, form):
        name = str(self.object)
        response = super().form_valid(form)
        logger.info("Dog %s deleted by %s", name, self.request.user)
        messages.success(self.request, f"{name} has been removed.")
        return response


@require_POST
def dog_inquire(request, pk):
    dog = get_object_or_404(Dog, pk=pk)
    form = AdoptionInquiryForm(request.POST)
    if not form.is_valid():
        context = {'object': dog, 'dog': dog, 'inquiry_form': form}
        return render(request, 'shelters/dog_detail.html', context)

    inquiry = form.save(commit=False)
    inquiry.dog = dog
    inquiry.save()
    logger.info("Adoption inquiry %s received for dog %s", inquiry.pk, dog.pk)
    messages.success(request, f"Thanks! {dog.shelter} will be in touch about {dog}.")
    return redirect(dog)


@require_GET
def health(request):
    """Database reachability and record counts for uptime monitoring."""
    info = {'database': connection.vendor}
    try:
        connection.ensure_connection()
        info['shelter_count'] = Shelter.objects.count()
        info['dog_count'] = Dog.objects.count()
        info['inquiry_count'] = AdoptionInquiry.objects.count()
    except DatabaseError as e:
        logger.error("Health check failed: %s", e)
        info['status'] = 'error'
        info['error'] = str(e)
        return JsonResponse(info, status=503)
    info['status'] = 'ok'
    return JsonResponse(info)
