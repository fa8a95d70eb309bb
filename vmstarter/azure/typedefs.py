from typing import NamedTuple

from vmstarter.utils import parse_resource_group


class AzureSub(NamedTuple):
  guid: str  # subscriptionId
  raw: dict  # Original data


class AzureVM(NamedTuple):
  id: str              # /subscriptions/GUID/resourceGroups/RG/providers/Microsoft.Compute/virtualMachines/NAME
  name: str
  resource_group: str  # Parsed from id, '' when id has no resource group
  raw: dict            # Original data


def azure_sub_from_json(item: dict) -> AzureSub:
  return AzureSub(guid=item.get('subscriptionId') or '', raw=item)


def azure_vm_from_json(item: dict) -> AzureVM:
  vm_id = item.get('id') or ''
  return AzureVM(id=vm_id, name=item.get('name') or '', resource_group=parse_resource_group(vm_id), raw=item)
