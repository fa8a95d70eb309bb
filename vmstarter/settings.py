import logging
import sys

from vmstarter.typedefs import RunConf


MANAGEMENT_ENDPOINT = 'https://management.azure.com'
MANAGEMENT_SCOPE = 'https://management.azure.com/.default'

SUBSCRIPTION_API_VERSION = '2022-12-01'
VM_API_VERSION = '2025-04-01'

REQUEST_TIMEOUT_SECONDS = 30

# Start is asynchronous on the ARM side, 202 is the only accepted answer.
LIST_OK_STATUS = 200
START_ACCEPTED_STATUS = 202

RESOURCE_GROUP_MARKER = '/resourceGroups/'


mk_subscriptions_url = lambda: f'{MANAGEMENT_ENDPOINT}/subscriptions?api-version={SUBSCRIPTION_API_VERSION}'
mk_vm_list_url = lambda sub_id: f'{MANAGEMENT_ENDPOINT}/subscriptions/{sub_id}/providers/Microsoft.Compute/virtualMachines?api-version={VM_API_VERSION}'
mk_vm_start_url = lambda sub_id, rg, vm_name: f'{MANAGEMENT_ENDPOINT}/subscriptions/{sub_id}/resourceGroups/{rg}/providers/Microsoft.Compute/virtualMachines/{vm_name}/start?api-version={VM_API_VERSION}'


LEVEL_TAGS = {
  logging.DEBUG: 'DBG',
  logging.INFO: 'INF',
  logging.WARNING: 'WRN',
  logging.ERROR: 'ERR',
  logging.CRITICAL: 'ERR',
}


class LevelTagFormatter(logging.Formatter):
  """
  Renders records as '[INF]: message'. Plain text, one tag per line.
  """
  def __init__(self):
    super().__init__('[%(leveltag)s]: %(message)s')

  def format(self, record):
    record.leveltag = LEVEL_TAGS.get(record.levelno, record.levelname)
    return super().format(record)


class _BelowWarning(logging.Filter):
  def filter(self, record):
    return record.levelno < logging.WARNING


def setup_logging(args: RunConf):
  if args.log_output == 'defaulthandler':
    logging.basicConfig(encoding='utf-8', level=logging.DEBUG)
  else:
    rootlogger = logging.getLogger()
    rootlogger.setLevel(logging.DEBUG)
    rootlogger.handlers = []
    formatter = LevelTagFormatter()

    # info and debug to stdout, the rest to stderr
    out_h = logging.StreamHandler(sys.stdout)
    out_h.setLevel(logging.DEBUG)
    out_h.addFilter(_BelowWarning())
    out_h.setFormatter(formatter)
    rootlogger.addHandler(out_h)

    err_h = logging.StreamHandler(sys.stderr)
    err_h.setLevel(logging.WARNING)
    err_h.setFormatter(formatter)
    rootlogger.addHandler(err_h)

  logging.getLogger('azure.identity').setLevel(logging.WARN)
  logging.getLogger('azure.identity._internal.decorators').setLevel(logging.WARN)
  logging.getLogger('azure.core.pipeline.policies.http_logging_policy').setLevel(logging.WARN)
  logging.getLogger('urllib3').setLevel(logging.WARN)
  logging.getLogger('msal').setLevel(logging.WARN)
