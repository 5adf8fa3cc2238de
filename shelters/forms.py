from django import forms

from .models import AdoptionInquiry, Dog, Shelter

MIN_INQUIRY_MESSAGE_LENGTH = 10


class ShelterForm(forms.ModelForm):
    class Meta:
        model = Shelter
        fields = ['name', 'location']


class DogForm(forms.ModelForm):
    class Meta:
        model = Dog
        fields = ['shelter', 'name', 'description', 'photo']
        widgets = {
            'description': forms.Textarea(attrs={'rows': 4}),
        }


class AdoptionInquiryForm(forms.ModelForm):
    class Meta:
        model = AdoptionInquiry
        fields = ['full_name', 'email', 'message']
        labels = {
            'full_name': 'Your name',
        }
        widgets = {
            'message': forms.Textarea(attrs={'rows': 3}),
        }

    def clean_email(self):
        return self.cleaned_data['email'].strip().lower()

    def clean_message(self):
        message = self.cleaned_data['message'].strip()
        if len(message) < MIN_INQUIRY_MESSAGE_LENGTH:
            raise forms.ValidationError(
                f'Please tell us a little more (at least {MIN_INQUIRY_MESSAGE_LENGTH} characters).'
            )
        return message
