import argparse

from vmstarter.ms_credential import get_management_token
from vmstarter.settings import setup_logging
from vmstarter.task_start_vms import add_start_vms_arguments
from vmstarter.typedefs import FatalRunError

import logging
logger = logging.getLogger('vmstarter.run')
logger.setLevel(logging.DEBUG)


def mk_parser():
  parser = argparse.ArgumentParser(
    prog='vm-starter',
    description='Start every VM in every subscription visible to the current identity.',
    epilog='')
  parser.add_argument('--auth', choices=['default', 'azcli', 'systemassignedmanagedidentity'], default='default', help='Configure what credentials are used: DefaultAzureCredential, AzCliCredentials or a Managed Identity. Default: default')
  parser.add_argument('--log-output', choices=['stdout', 'defaulthandler'], default='stdout', help='Configure logging.')
  add_start_vms_arguments(parser)
  return parser


def main(arg_string=None) -> int:
  args = mk_parser().parse_args(arg_string)
  setup_logging(args)

  try:
    token = get_management_token(args)
    args.task_func(args, token)
  except FatalRunError as e:
    logger.error('%s', e)
    return 1
  return 0


def cli():
  raise SystemExit(main())
