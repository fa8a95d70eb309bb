from typing import List, Optional, TypeAlias
import argparse
from dataclasses import dataclass, field

RunConf: TypeAlias = argparse.Namespace

SubscriptionGuid: TypeAlias = str
AccessToken: TypeAlias = str


class FatalRunError(Exception):
  """Nothing useful can be done after this, the run ends with a non-zero exit."""


class TokenAcquisitionError(FatalRunError):
  pass


class SubscriptionListError(FatalRunError):
  pass


class VirtualMachineListError(Exception):
  """Listing failed for one subscription. Only that subscription is skipped."""
  def __init__(self, subscription_id: SubscriptionGuid, message: str):
    super().__init__(message)
    self.subscription_id = subscription_id


@dataclass
class StartOutcome:
  subscription_id: SubscriptionGuid
  vm_name: str
  resource_group: str
  url: str
  status_code: Optional[int] = None   # None when the request never got an answer
  accepted: bool = False
  error: Optional[str] = None


@dataclass
class RunSummary:
  subscriptions_processed: int = 0
  subscriptions_skipped: int = 0
  outcomes: List[StartOutcome] = field(default_factory=list)

  @property
  def starts_accepted(self) -> int:
    return len([o for o in self.outcomes if o.accepted])

  @property
  def starts_failed(self) -> int:
    return len([o for o in self.outcomes if not o.accepted])

  def __repr__(self) -> str:
    return summary_to_string(self)


def summary_to_string(s: RunSummary) -> str:
  return '%d subscriptions processed, %d skipped, %d VM starts accepted, %d failed' % (
    s.subscriptions_processed, s.subscriptions_skipped, s.starts_accepted, s.starts_failed)
