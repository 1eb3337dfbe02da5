from .transform import handle_transform, _transform_single_file, _print_batch_summary
from .naming import handle_slug
from .renamings import handle_renamings
