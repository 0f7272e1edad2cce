import aioboto3

from menuboard.core.config import settings

_session = aioboto3.Session()


def public_url(key: str) -> str:
    key = key.lstrip("/")
    return f"{settings.do_spaces_cdn_base.rstrip('/')}/{key}"


async def put_public_object(*, key: str, body: bytes, content_type: str) -> str:
    """
    Uploads a public-read object to Spaces and returns the object key.
    """
    if not settings.spaces_enabled:
        raise RuntimeError("Spaces env vars not fully configured")

    key = key.lstrip("/")
    async with _session.client(
        "s3",
        region_name=settings.do_spaces_region,
        endpoint_url=settings.do_spaces_endpoint,
        aws_access_key_id=settings.do_spaces_key,
        aws_secret_access_key=settings.do_spaces_secret,
    ) as s3:
        await s3.put_object(
            Bucket=settings.do_spaces_bucket,
            Key=key,
            Body=body,
            ContentType=content_type or "application/octet-stream",
            ACL="public-read",
        )
    return key
