from azure.core.exceptions import ClientAuthenticationError
from azure.identity import AzureCliCredential
from azure.identity import DefaultAzureCredential
from azure.identity import ManagedIdentityCredential

from vmstarter.settings import MANAGEMENT_SCOPE
from vmstarter.typedefs import AccessToken, RunConf, TokenAcquisitionError

import logging
logger = logging.getLogger('vmstarter.ms_credential')
logger.setLevel(logging.DEBUG)


def get_ms_credential(args: RunConf):
    if args.auth == 'default':
        return DefaultAzureCredential()
    elif args.auth == 'azcli':
        return AzureCliCredential()
    elif args.auth == 'systemassignedmanagedidentity':
        return ManagedIdentityCredential()
    else:
        raise TokenAcquisitionError('Unknown auth mode: %s' % args.auth)


def get_management_token(args: RunConf) -> AccessToken:
    """
    One token per run. It is not refreshed, calls made after it
    expires will start failing with 401.
    """
    try:
        credential = get_ms_credential(args)
        token = credential.get_token(MANAGEMENT_SCOPE)
    except (ClientAuthenticationError, ValueError) as e:
        raise TokenAcquisitionError('Failed to get Azure token: %s' % e) from e
    logger.debug('Got management token (auth=%s)', args.auth)
    return token.token
