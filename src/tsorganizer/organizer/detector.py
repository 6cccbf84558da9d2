from tsorganizer.schemas import OrganizeResult


def detect_change(original: str, organized: str) -> OrganizeResult:
    """Exact comparison; only a real difference counts as organized."""
    if organized == original:
        return OrganizeResult(changed=False, output_text=original)
    return OrganizeResult(changed=True, output_text=organized)
