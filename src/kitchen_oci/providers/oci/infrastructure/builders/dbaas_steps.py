"""Builder steps for database systems."""

from kitchen_oci.domain.base.exceptions import ConfigurationError
from kitchen_oci.providers.oci.domain.launch_details import (
    DATABASE_EDITION_ENTERPRISE_EDITION,
    DB_WORKLOAD_OLTP,
    LICENSE_MODEL_BRING_YOUR_OWN_LICENSE,
    DbBackupConfig,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import (
    BuildContext,
    builder_step,
    fill_default,
    read_public_key,
    require,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator

# The hostname must begin with an alphabetic character, may contain
# alphanumerics and hyphens, and is at most 16 characters long.
HOSTNAME_MAX_LENGTH = 16
HOSTNAME_TRIMMED_PREFIX_LENGTH = 12
CLUSTER_NAME_MAX_LENGTH = 11
ADMIN_PASSWORD_SPECIAL_CHARS = ["#", "_", "-"]


def _hostname_prefix(context: BuildContext) -> str:
    return require(context.config.hostname_prefix, "hostname_prefix", "dbaas")


def dbaas_hostname(prefix: str, generator: RandomGenerator) -> str:
    """
    Long form ``<prefix>-<filler>-<3 random>`` of exactly 16 characters when the
    prefix leaves room for it, else ``<prefix[:12]>-<3 random>``.
    """
    # two hyphens and the 3 character tail
    filler_length = HOSTNAME_MAX_LENGTH - len(prefix) - 5
    if filler_length > 0:
        return "-".join([prefix, generator.random_string(filler_length), generator.random_string(3)])
    return f"{prefix[:HOSTNAME_TRIMMED_PREFIX_LENGTH]}-{generator.random_string(3)}"


def cluster_name_for(prefix: str, generator: RandomGenerator) -> str:
    base = prefix.split("-")[0]
    if not base[:1].isalpha():
        raise ConfigurationError(
            f"hostname_prefix {prefix!r} must start with a letter to derive a cluster name",
            details={"field": "dbaas.hostname_prefix"},
        )
    # no room for "-<suffix>"
    if len(base) >= CLUSTER_NAME_MAX_LENGTH - 1:
        return base[:CLUSTER_NAME_MAX_LENGTH]
    return f"{base}-{generator.random_string(CLUSTER_NAME_MAX_LENGTH - 1 - len(base))}"


@builder_step("hostname")
def hostname(context: BuildContext) -> None:
    context.request.hostname = dbaas_hostname(_hostname_prefix(context), context.generator)


@builder_step("display_name")
def display_name(context: BuildContext) -> None:
    # does not have to be unique
    gen = context.generator
    context.request.display_name = "-".join(
        [_hostname_prefix(context), gen.random_string(4), gen.random_number(2)]
    )


@builder_step("cluster_name")
def cluster_name(context: BuildContext) -> None:
    context.request.cluster_name = cluster_name_for(_hostname_prefix(context), context.generator)


@builder_step("cpu_core_count")
def cpu_core_count(context: BuildContext) -> None:
    context.request.cpu_core_count = fill_default(context.config.dbaas, "cpu_core_count", 2)


def _create_database_details(context: BuildContext) -> None:
    dbaas = context.config.dbaas
    details = context.database_details
    details.db_name = fill_default(dbaas, "db_name", "dbaas1")
    details.pdb_name = fill_default(dbaas, "pdb_name", "pdb001")
    details.admin_password = fill_default(
        dbaas,
        "admin_password",
        lambda: context.generator.random_password(ADMIN_PASSWORD_SPECIAL_CHARS),
    )
    details.character_set = fill_default(dbaas, "character_set", "AL32UTF8")
    details.db_workload = fill_default(dbaas, "db_workload", DB_WORKLOAD_OLTP)
    details.ncharacter_set = fill_default(dbaas, "ncharacter_set", "AL16UTF16")
    details.db_backup_config = DbBackupConfig(auto_backup_enabled=False)


@builder_step("db_home")
def db_home(context: BuildContext) -> None:
    home = context.db_home_details
    home.db_version = require(context.config.dbaas.db_version, "db_version", "dbaas")
    home.display_name = f"dbhome{context.generator.random_number(10)}"
    _create_database_details(context)
    home.database = context.database_details
    context.request.db_home = home


@builder_step("database_edition")
def database_edition(context: BuildContext) -> None:
    context.request.database_edition = fill_default(
        context.config.dbaas, "database_edition", DATABASE_EDITION_ENTERPRISE_EDITION
    )


@builder_step("subnet_id")
def subnet_id(context: BuildContext) -> None:
    context.request.subnet_id = context.config.subnet_id


@builder_step("nsg_ids")
def nsg_ids(context: BuildContext) -> None:
    context.request.nsg_ids = context.config.nsg_ids


@builder_step("ssh_public_keys")
def ssh_public_keys(context: BuildContext) -> None:
    keypath = require(context.config.ssh_keypath, "ssh_keypath", "dbaas")
    context.request.ssh_public_keys = [read_public_key(keypath)]


@builder_step("initial_data_storage_size_in_gb")
def initial_data_storage_size_in_gb(context: BuildContext) -> None:
    context.request.initial_data_storage_size_in_gb = fill_default(
        context.config.dbaas, "initial_data_storage_size_in_gb", 256
    )


@builder_step("node_count")
def node_count(context: BuildContext) -> None:
    context.request.node_count = 1


@builder_step("license_model")
def license_model(context: BuildContext) -> None:
    context.request.license_model = fill_default(
        context.config.dbaas, "license_model", LICENSE_MODEL_BRING_YOUR_OWN_LICENSE
    )


DB_SYSTEM_STEPS = [
    hostname,
    display_name,
    cluster_name,
    cpu_core_count,
    db_home,
    database_edition,
    subnet_id,
    nsg_ids,
    ssh_public_keys,
    initial_data_storage_size_in_gb,
    node_count,
    license_model,
]
