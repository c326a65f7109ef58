import string

from hypothesis import strategies as st

from instance_metadata import InstanceIdentity

_SEGMENT = st.text(
    alphabet=string.ascii_lowercase + string.digits + "-_", min_size=1, max_size=12
)

BASE_URLS = st.sampled_from(
    [
        "http://169.254.169.254/",
        "http://169.254.169.254/latest/",
        "http://169.254.169.254/latest/meta-data",
        "http://metadata.internal/computeMetadata/v1/",
        "http://127.0.0.1:8080/a/b",
    ]
)

# Relative paths, with and without a leading slash
PATHS = st.builds(
    lambda absolute, segments: ("/" if absolute else "") + "/".join(segments),
    st.booleans(),
    st.lists(_SEGMENT, min_size=1, max_size=5),
)

_ALIASES = [
    field.alias or name for name, field in InstanceIdentity.model_fields.items()
]

# Identity documents with an arbitrary subset of the known fields
IDENTITY_DOCUMENTS = st.dictionaries(
    keys=st.sampled_from(_ALIASES),
    values=st.text(),
)
