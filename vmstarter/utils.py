from vmstarter.settings import RESOURCE_GROUP_MARKER


def parse_resource_group(resource_id: str) -> str:
  """
  /subscriptions/{sid}/resourceGroups/{rg}/providers/... -> {rg}

  Empty string when the marker is not there.
  """
  rg_idx = resource_id.find(RESOURCE_GROUP_MARKER)
  if rg_idx == -1:
    return ''
  rest = resource_id[rg_idx + len(RESOURCE_GROUP_MARKER):]
  return rest.split('/', 1)[0]
