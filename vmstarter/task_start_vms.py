from vmstarter.azure.arm_queries import list_subscriptions, list_virtual_machines, start_virtual_machine
from vmstarter.typedefs import AccessToken, RunConf, RunSummary, VirtualMachineListError


import logging
logger = logging.getLogger('vmstarter.task_start_vms')
logger.setLevel(logging.DEBUG)


def do_task_start_vms(args: RunConf, token: AccessToken) -> RunSummary:
  summary = RunSummary()

  # SubscriptionListError is fatal and propagates to run.main
  subs = list_subscriptions(token, args.follow_next_link)

  for sub in subs:
    logger.info('Processing subscription %s', sub.guid)
    try:
      vms = list_virtual_machines(token, sub.guid, args.follow_next_link)
    except VirtualMachineListError as e:
      logger.error('%s', e)
      summary.subscriptions_skipped += 1
      continue

    summary.subscriptions_processed += 1
    for vm in vms:
      summary.outcomes.append(start_virtual_machine(token, sub.guid, vm))

  logger.info('Task ready: %s', summary)
  return summary


def add_start_vms_arguments(parser):
  parser.set_defaults(task_func=do_task_start_vms)
  parser.add_argument('--follow-next-link', action='store_true', help='Follow nextLink on the subscription and VM lists. Default: only the first page is used.')
