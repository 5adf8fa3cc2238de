from django.db import transaction
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from .cache import invalidate_dog_counts
from .models import Dog
from .placeholders import delete_placeholder


@receiver(post_save, sender=Dog)
@receiver(post_delete, sender=Dog)
def refresh_dog_counts(sender, **kwargs):
    invalidate_dog_counts()


@receiver(pre_save, sender=Dog)
def remove_replaced_placeholder(sender, instance, **kwargs):
    if not instance.pk:
        return
    previous = Dog.objects.filter(pk=instance.pk).values_list('photo', flat=True).first()
    if previous and previous != instance.photo.name:
        storage = instance.photo.storage
        transaction.on_commit(lambda: delete_placeholder(storage, previous))


@receiver(post_delete, sender=Dog)
def remove_deleted_placeholder(sender, instance, **kwargs):
    if instance.photo:
        storage, name = instance.photo.storage, instance.photo.name
        transaction.on_commit(lambda: delete_placeholder(storage, name))
