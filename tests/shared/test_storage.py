"""
Tests for the image storage adapters.
"""
import re
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from shared.infrastructure.storage import ImageStorage, S3ImageStorage, StorageError
from shared.infrastructure.storage.s3_storage import generate_file_name

BASE_URL = 'https://storage.test/test-bucket/'


def client_error(operation):
    return ClientError({'Error': {'Code': 'AccessDenied', 'Message': 'denied'}}, operation)


def upload_file(name, content_type='image/png'):
    file_obj = MagicMock()
    file_obj.name = name
    file_obj.content_type = content_type
    return file_obj


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def storage(client):
    return S3ImageStorage(client=client, bucket='test-bucket')


def test_generate_file_name_sanitizes():
    name = generate_file_name('my photo (1).png', prefix='main')

    assert re.fullmatch(r'main_\d+_[a-z0-9]{6}_my_photo__1_\.png', name)


def test_upload_puts_object_and_returns_url(storage, client):
    url = storage.upload(upload_file('a.png'), folder='products', prefix='main')

    assert url.startswith(BASE_URL + 'products/main_')
    assert url.endswith('_a.png')
    _, bucket, key = client.upload_fileobj.call_args.args
    assert bucket == 'test-bucket'
    assert key == url[len(BASE_URL):]
    assert client.upload_fileobj.call_args.kwargs == {'ExtraArgs': {'ContentType': 'image/png'}}


def test_upload_failure(storage, client):
    client.upload_fileobj.side_effect = client_error('PutObject')

    with pytest.raises(StorageError) as exc_info:
        storage.upload(upload_file('a.png'))

    assert exc_info.value.message.startswith("Error uploading image:")


def test_upload_many_keeps_input_order(storage, client):
    files = [upload_file(f'{i}.png') for i in range(5)]

    urls = storage.upload_many(files, folder='products', prefix='gallery')

    assert len(urls) == 5
    assert [url.rsplit('_', 1)[-1] for url in urls] == [f'{i}.png' for i in range(5)]
    assert client.upload_fileobj.call_count == 5


def test_upload_many_fails_as_a_batch(storage, client):
    client.upload_fileobj.side_effect = [None, client_error('PutObject')]

    with pytest.raises(StorageError) as exc_info:
        storage.upload_many([upload_file('a.png'), upload_file('b.png')])

    assert exc_info.value.message.startswith("Error uploading images:")


def test_upload_many_without_files(storage, client):
    assert storage.upload_many([]) == []
    client.upload_fileobj.assert_not_called()


def test_delete(storage, client):
    assert storage.delete(BASE_URL + 'products/main_1_abc123_a.png') is True

    client.delete_object.assert_called_once_with(
        Bucket='test-bucket', Key='products/main_1_abc123_a.png',
    )


@pytest.mark.parametrize('url', ['', None])
def test_delete_requires_url(storage, url):
    with pytest.raises(StorageError):
        storage.delete(url)


def test_delete_failure(storage, client):
    client.delete_object.side_effect = client_error('DeleteObject')

    with pytest.raises(StorageError):
        storage.delete(BASE_URL + 'products/a.png')


def test_delete_many_reports_results(storage, client):
    client.delete_objects.return_value = {'Deleted': [{'Key': 'products/a.png'}]}

    result = storage.delete_many([BASE_URL + 'products/a.png', BASE_URL + 'products/b.png'])

    assert result == {'success': 1, 'failed': 1, 'deleted_paths': ['products/a.png']}
    _, kwargs = client.delete_objects.call_args
    assert kwargs['Delete']['Objects'] == [{'Key': 'products/a.png'}, {'Key': 'products/b.png'}]


def test_delete_many_requires_urls(storage, client):
    with pytest.raises(StorageError) as exc_info:
        storage.delete_many([])

    assert exc_info.value.message == "Error deleting multiple images: No image URLs provided"
    client.delete_objects.assert_not_called()


@pytest.mark.parametrize('url, key', [
    ('https://elsewhere.test/products/x.png', 'products/x.png'),
    ('https://cdn.other/test-bucket/products/gallery/x.png', 'products/gallery/x.png'),
    ('https://elsewhere.test/x.png', 'x.png'),
])
def test_extract_key_from_foreign_url(storage, url, key):
    assert storage.extract_key(url) == key


def test_delete_foreign_url_keeps_folder(storage, client):
    storage.delete('https://cdn.other/test-bucket/products/main_1_abc123_a.png')

    client.delete_object.assert_called_once_with(
        Bucket='test-bucket', Key='products/main_1_abc123_a.png',
    )


def test_check_bucket(storage, client):
    storage.check_bucket()

    client.head_bucket.assert_called_once_with(Bucket='test-bucket')


def test_check_bucket_unreachable(storage, client):
    client.head_bucket.side_effect = client_error('HeadBucket')

    with pytest.raises(StorageError) as exc_info:
        storage.check_bucket()

    assert exc_info.value.message.startswith("Bucket test-bucket is not reachable:")


class TestReplace:

    def test_uploads_then_deletes_old(self, storage, client):
        old_url = BASE_URL + 'products/old.png'

        new_url = storage.replace(old_url, upload_file('new.png'), folder='products', prefix='main')

        assert new_url.startswith(BASE_URL + 'products/main_')
        client.delete_object.assert_called_once_with(Bucket='test-bucket', Key='products/old.png')

    def test_keeps_default_image(self, storage, client):
        default_url = BASE_URL + 'defaults/product.png'

        storage.replace(default_url, upload_file('new.png'), default_url=default_url)

        client.delete_object.assert_not_called()

    def test_old_image_delete_failure_is_ignored(self, storage, client):
        client.delete_object.side_effect = client_error('DeleteObject')

        new_url = storage.replace(BASE_URL + 'products/old.png', upload_file('new.png'))

        assert new_url.startswith(BASE_URL)

    def test_upload_failure_keeps_old_image(self, storage, client):
        client.upload_fileobj.side_effect = client_error('PutObject')

        with pytest.raises(StorageError):
            storage.replace(BASE_URL + 'products/old.png', upload_file('new.png'))

        client.delete_object.assert_not_called()

    def test_unexpected_delete_error_is_ignored(self):
        class UnreachableStorage(ImageStorage):
            def upload(self, file_obj, folder="", prefix=""):
                return f"https://cdn.test/{folder}/{prefix}_{file_obj.name}"

            def upload_many(self, files, folder="", prefix=""):
                return [self.upload(f, folder, prefix) for f in files]

            def delete(self, url):
                raise ConnectionError("storage unreachable")

            def delete_many(self, urls):
                raise ConnectionError("storage unreachable")

        new_url = UnreachableStorage().replace(
            'https://cdn.test/products/old.png', upload_file('new.png'), folder='products', prefix='main',
        )

        assert new_url == 'https://cdn.test/products/main_new.png'
