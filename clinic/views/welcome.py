from django.shortcuts import render
from django.views.decorators.http import require_GET


@require_GET
def welcome(request):
    return render(request, 'welcome.html')
