import base64

import pytest

from admissions.pdf.images import build_qr_data_uri, image_to_data_uri, resolve_file_path


@pytest.mark.pdf
class TestImageEmbedding:
    """Test converting image files into data URIs"""

    def test_png_converted(self, png_file, png_bytes):
        data_uri = image_to_data_uri(png_file)

        assert data_uri.startswith('data:image/png;base64,')
        assert base64.b64decode(data_uri.split(',', 1)[1]) == png_bytes

    def test_missing_file(self, tmp_path):
        assert image_to_data_uri(tmp_path / 'nope.png') is None

    def test_empty_reference(self):
        assert image_to_data_uri(None) is None
        assert image_to_data_uri('') is None

    def test_oversized_file_skipped(self, png_file):
        assert image_to_data_uri(png_file, max_bytes=10) is None

    def test_non_image_skipped(self, tmp_path):
        path = tmp_path / 'receipt.png'
        path.write_bytes(b'%PDF-1.4 not an image')

        assert image_to_data_uri(path) is None

    @pytest.mark.django_db
    def test_stored_upload_converted(self, application):
        data_uri = image_to_data_uri(application.profile_image)

        assert data_uri.startswith('data:image/png;base64,')

    def test_resolve_file_path_without_local_path(self):
        class RemoteFile:
            name = 'uploads/remote.png'

            @property
            def path(self):
                raise NotImplementedError("This backend doesn't support absolute paths.")

        assert resolve_file_path(RemoteFile()) is None

    def test_qr_code(self):
        data_uri = build_qr_data_uri('APP:HLC20250001|CNIC:41303-7654321-1')

        assert data_uri.startswith('data:image/png;base64,')
        assert base64.b64decode(data_uri.split(',', 1)[1]).startswith(b'\x89PNG')
