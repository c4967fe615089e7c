import boto3
import logging

LOGGER = logging.getLogger(__name__)


class ParamStore():
    """Simple interface to SSM Param Store.

    Usage:
        ```
        from inxpress_rates.config.param_store import ParamStore

        param_store = ParamStore('frankandoak', 'x')
        settings = param_store.get_param('inxpress')
        param_store.put_param('inxpress', '{"account_id": "ACME1", "service_type_label": "Express"}')
        ```
    """

    def __init__(self, tenant, stage, client=None):
        """Initialize the module.
        All calls are rooted at `/tenant-name/stage-symbol/` so the carrier
        settings of a tenant in sandbox live under e.g. `/frankandoak/x/inxpress`.

        Args:
            tenant: Name of the tenant (e.g., "frankandoak").
            stage: One-letter symbol representing the stage ("x", "s" or "p").
            client: Optional boto3 SSM client, created when omitted.
        """
        self.tenant = tenant
        self.stage = stage
        self.client = client if client else boto3.client('ssm')
        self.path_root = '/%s/%s/' % (tenant, stage)

    def get_path_root(self):
        return self.path_root

    def get_param(self, key=''):
        """Get a single parameter value, or None if it cannot be read."""
        path = self.path_root + key

        try:
            response = self.client.get_parameter(
                Name=path, WithDecryption=True)
            return response['Parameter']['Value']
        except self.client.exceptions.ParameterNotFound:
            LOGGER.warning(f'Parameter {path} not found')
            return None
        except Exception:
            LOGGER.exception(f'Error when trying to get parameter {path}')
            return None

    def put_param(self, key, value):
        """Create or overwrite a single string parameter."""
        path = self.path_root + key
        LOGGER.info(f'Writing parameter {path}')
        self.client.put_parameter(
            Name=path, Value=value, Type='String', Overwrite=True)
