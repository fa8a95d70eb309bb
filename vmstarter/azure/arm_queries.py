from typing import List, Set, Tuple

import requests

from vmstarter.azure.typedefs import AzureSub, AzureVM, azure_sub_from_json, azure_vm_from_json
from vmstarter.settings import LIST_OK_STATUS, REQUEST_TIMEOUT_SECONDS, START_ACCEPTED_STATUS
from vmstarter.settings import mk_subscriptions_url, mk_vm_list_url, mk_vm_start_url
from vmstarter.typedefs import AccessToken, StartOutcome, SubscriptionGuid
from vmstarter.typedefs import SubscriptionListError, VirtualMachineListError

import logging
logger = logging.getLogger('vmstarter.arm_queries')
logger.setLevel(logging.DEBUG)


class _ListFetchError(Exception):
    pass


def send_request(method: str, url: str, token: AccessToken) -> requests.Response:
    """
    Single ARM call. Status codes are left to the caller,
    transport errors (requests.RequestException) propagate.
    """
    headers = {
        'Authorization': f'Bearer {token}',
        'Content-Type': 'application/json'
    }
    return requests.request(method, url, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)


def _check_string_fields(page: List[dict], string_fields: Tuple[str, ...], what: str):
    for item in page:
        for field_name in string_fields:
            value = item.get(field_name)
            if value is not None and not isinstance(value, str):
                raise _ListFetchError('Failed to parse %s JSON: %s is %s, not a string' % (what, field_name, type(value).__name__))


def _fetch_value_list(token: AccessToken, url: str, what: str, follow_next_link: bool = False, string_fields: Tuple[str, ...] = ()) -> List[dict]:
    """
    GET an ARM list endpoint and return the items under 'value'.

    Only the first page is read unless follow_next_link is set.
    Fields named in string_fields must be strings or null.
    """
    items: List[dict] = []
    visited: Set[str] = set()
    while url:
        visited.add(url)
        try:
            response = send_request('GET', url, token)
        except requests.RequestException as e:
            raise _ListFetchError('Failed to fetch %s: %s' % (what, e)) from e

        if response.status_code != LIST_OK_STATUS:
            raise _ListFetchError('Unexpected status for %s: %d' % (what, response.status_code))

        try:
            body = response.json()
        except ValueError as e:
            raise _ListFetchError('Failed to parse %s JSON: %s' % (what, e)) from e
        if not isinstance(body, dict):
            raise _ListFetchError('Failed to parse %s JSON: expected an object' % what)

        page = body.get('value')
        if page is None:
            page = []
        if not isinstance(page, list) or not all(isinstance(item, dict) for item in page):
            raise _ListFetchError('Failed to parse %s JSON: malformed value list' % what)
        _check_string_fields(page, string_fields, what)
        items.extend(page)

        next_link = body.get('nextLink')
        if next_link and not follow_next_link:
            logger.debug('Not following nextLink for %s, only the first page is used.', what)
            next_link = None
        elif next_link and not isinstance(next_link, str):
            raise _ListFetchError('Failed to parse %s JSON: nextLink is not a string' % what)
        elif next_link in visited:
            logger.warning('nextLink for %s points to an already fetched page, stopping.', what)
            next_link = None
        url = next_link
    return items


def list_subscriptions(token: AccessToken, follow_next_link: bool = False) -> List[AzureSub]:
    try:
        items = _fetch_value_list(token, mk_subscriptions_url(), 'subscriptions', follow_next_link,
                                  string_fields=('subscriptionId',))
    except _ListFetchError as e:
        raise SubscriptionListError(str(e)) from e
    return [azure_sub_from_json(item) for item in items]


def list_virtual_machines(token: AccessToken, subscription_id: SubscriptionGuid, follow_next_link: bool = False) -> List[AzureVM]:
    try:
        items = _fetch_value_list(token, mk_vm_list_url(subscription_id), 'VMs of %s' % subscription_id, follow_next_link,
                                  string_fields=('id', 'name'))
    except _ListFetchError as e:
        raise VirtualMachineListError(subscription_id, str(e)) from e
    return [azure_vm_from_json(item) for item in items]


def start_virtual_machine(token: AccessToken, subscription_id: SubscriptionGuid, vm: AzureVM) -> StartOutcome:
    start_url = mk_vm_start_url(subscription_id, vm.resource_group, vm.name)
    outcome = StartOutcome(
        subscription_id=subscription_id,
        vm_name=vm.name,
        resource_group=vm.resource_group,
        url=start_url
    )
    target = '\n    SubscriptionID: %s\n    ResourceGroup: %s\n    VM Name: %s\n    URL: %s' % (
        subscription_id, vm.resource_group, vm.name, start_url)

    if not vm.resource_group:
        logger.warning('No resource group in VM id %r, the start request will most likely be rejected.', vm.id)
    logger.debug('Sending POST request to start VM.%s', target)

    try:
        response = send_request('POST', start_url, token)
    except requests.RequestException as e:
        outcome.error = str(e)
        logger.error('Failed to start VM %s: %s%s', vm.name, e, target)
        return outcome

    outcome.status_code = response.status_code
    if response.status_code != START_ACCEPTED_STATUS:
        outcome.error = response.text[:500]
        logger.error('Unexpected status for starting VM %s: %d%s', vm.name, response.status_code, target)
        return outcome

    outcome.accepted = True
    logger.info('VM %s start request accepted', vm.name)
    return outcome
