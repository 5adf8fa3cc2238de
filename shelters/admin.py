from django.contrib import admin

from .models import AdoptionInquiry, Dog, Shelter


class DogInline(admin.TabularInline):
    model = Dog
    fields = ['name', 'description', 'photo']
    extra = 0


@admin.register(Shelter)
class ShelterAdmin(admin.ModelAdmin):
    list_display = ['name', 'location', 'created_at']
    search_fields = ['name', 'location']
    inlines = [DogInline]


@admin.register(Dog)
class DogAdmin(admin.ModelAdmin):
    list_display = ['name', 'shelter', 'intake_date']
    list_filter = ['shelter']
    search_fields = ['name', 'description', 'shelter__name']
    date_hierarchy = 'intake_date'
    list_select_related = ['shelter']


@admin.register(AdoptionInquiry)
class AdoptionInquiryAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'dog', 'created_at']
    list_filter = ['dog__shelter']
    search_fields = ['full_name', 'email', 'dog__name']
    readonly_fields = ['dog', 'full_name', 'email', 'message', 'created_at']

    def has_add_permission(self, request):
        # Inquiries only come in through the public dog pages
        return False
