"""
Owner pages.

These views adapt HTTP requests to :class:`OwnerController` calls: they
bind request parameters onto an owner, hand the controller explicit
validation and flash holders, and resolve whatever it returns into a
response.  Flash entries become Django messages (``error`` as an error
message, anything else as a success message).
"""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpResponseBadRequest
from django.views.decorators.http import require_GET, require_http_methods

from ..binding import WebDataBinder
from ..dependencies import get_owner_controller, get_view_resolver
from ..forms import OwnerForm
from ..validation import FlashContext, ValidationOutcome


def _bind(controller, owner, data, validate=True) -> ValidationOutcome:
    binder = WebDataBinder(owner, form_class=OwnerForm)
    controller.set_allowed_fields(binder)
    return binder.bind(data, validate=validate)


def _apply_flash(request, flash: FlashContext) -> None:
    for key, text in flash.messages.items():
        if key == 'error':
            messages.error(request, text)
        else:
            messages.success(request, text)


def _form_model(owner, result: ValidationOutcome | None = None) -> dict:
    return {'owner': owner, 'errors': result.as_dict() if result else {}}


@require_http_methods(['GET', 'POST'])
def create_owner(request):
    controller = get_owner_controller()
    resolver = get_view_resolver()
    owner = controller.find_owner(None)
    if request.method == 'GET':
        return resolver.resolve(request, controller.init_creation_form(), _form_model(owner))

    result = _bind(controller, owner, request.POST)
    flash = FlashContext()
    view = controller.process_creation_form(owner, result, flash)
    _apply_flash(request, flash)
    return resolver.resolve(request, view, _form_model(owner, result))


@require_GET
def find_owners_form(request):
    controller = get_owner_controller()
    owner = controller.find_owner(None)
    return get_view_resolver().resolve(request, controller.init_find_form(), _form_model(owner))


@require_GET
def list_owners(request):
    try:
        page = int(request.GET.get('page') or 1)
    except ValueError:
        return HttpResponseBadRequest('page must be a number')
    if page < 1:
        return HttpResponseBadRequest('page must be at least 1')

    controller = get_owner_controller()
    owner = controller.find_owner(None)
    result = _bind(controller, owner, request.GET, validate=False)
    model: dict = {}
    view = controller.process_find_form(page, owner, result, model)
    model.update(_form_model(owner, result))
    return get_view_resolver().resolve(request, view, model)


@require_http_methods(['GET', 'POST'])
def edit_owner(request, owner_id: int):
    controller = get_owner_controller()
    resolver = get_view_resolver()
    owner = controller.find_owner(owner_id)
    if request.method == 'GET':
        return resolver.resolve(request, controller.init_update_owner_form(), _form_model(owner))

    result = _bind(controller, owner, request.POST)
    flash = FlashContext()
    view = controller.process_update_owner_form(owner, result, owner_id, flash)
    _apply_flash(request, flash)
    return resolver.resolve(request, view, _form_model(owner, result), path_variables={'ownerId': owner_id})


@require_GET
def owner_detail(request, owner_id: int):
    controller = get_owner_controller()
    return get_view_resolver().resolve(request, controller.show_owner(owner_id))
