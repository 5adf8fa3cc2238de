from django.db import models
from django.urls import reverse


class Shelter(models.Model):
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('shelters:shelter_detail', args=[str(self.id)])


class Dog(models.Model):
    # A shelter cannot be deleted while it still houses dogs
    shelter = models.ForeignKey(Shelter, on_delete=models.PROTECT, related_name='dogs')
    name = models.CharField(max_length=200)
    description = models.TextField()
    intake_date = models.DateTimeField(auto_now_add=True)
    photo = models.ImageField(upload_to='dogs/', blank=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('shelters:dog_detail', args=[str(self.id)])

    @property
    def photo_url(self):
        """URL of the uploaded (or generated placeholder) photo, if any."""
        if self.photo:
            return self.photo.url
        return None


class AdoptionInquiry(models.Model):
    """A visitor's request to learn more about adopting a dog."""

    dog = models.ForeignKey(Dog, on_delete=models.CASCADE, related_name='inquiries')
    full_name = models.CharField(max_length=200)
    email = models.EmailField()
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'adoption inquiries'

    def __str__(self):
        return f"{self.full_name} about {self.dog}"
