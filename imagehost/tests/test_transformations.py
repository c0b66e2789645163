"""Tests for transformations against a stubbed backend."""

from unittest.mock import call

import pytest

from ..application.transformations import (
    Border,
    Canvas,
    Compress,
    Convert,
    Crop,
    Desaturate,
    FlipHorizontally,
    FlipVertically,
    MaxSize,
    Resize,
    Rotate,
    bind_params,
)
from ..application.transformations.canvas import CanvasParams
from ..config import PlacementMode
from ..domain.entities.image import Image
from ..exceptions import ImageBackendError, TransformationError, ValidationError
from .helpers import stub_backend


def make_model(width: int = 665, height: int = 463, extension: str = "png") -> Image:
    return Image(blob=b"original", width=width, height=height, extension=extension)


class TestBindParams:
    """Test parameter extraction and coercion."""

    def test_numeric_strings_are_coerced(self):
        params = bind_params(CanvasParams, {"width": "200", "height": "100", "x": "5"})
        assert params.width == 200
        assert params.height == 100
        assert params.x == 5
        assert params.y == 0
        assert params.mode is PlacementMode.FREE
        assert params.bg is None

    def test_blank_values_use_defaults(self):
        params = bind_params(CanvasParams, {"width": 1, "height": 1, "mode": "", "bg": ""})
        assert params.mode is PlacementMode.FREE
        assert params.bg is None

    def test_unknown_keys_ignored(self):
        params = bind_params(CanvasParams, {"width": 1, "height": 1, "foo": "bar"})
        assert not hasattr(params, "foo")

    def test_first_missing_parameter_is_named(self):
        with pytest.raises(ValidationError) as exc_info:
            bind_params(CanvasParams, {"x": "nope"})
        assert exc_info.value.field == "width"
        assert exc_info.value.message == "Missing required parameter: width"

    def test_bad_type(self):
        with pytest.raises(ValidationError) as exc_info:
            bind_params(CanvasParams, {"width": "wide", "height": 1})
        assert exc_info.value.field == "width"
        assert "Invalid value for parameter width" in exc_info.value.message

    def test_unknown_mode(self):
        with pytest.raises(ValidationError) as exc_info:
            bind_params(CanvasParams, {"width": 1, "height": 1, "mode": "diagonal"})
        assert exc_info.value.field == "mode"

    def test_missing_params_mapping(self):
        with pytest.raises(ValidationError):
            bind_params(CanvasParams, None)


class TestCanvas:
    """Test canvas transformation call sequence."""

    def test_center_crop_and_placement(self):
        backend = stub_backend()
        image = make_model(665, 463)

        Canvas.from_params({"width": 463, "height": 463, "mode": "center"}, backend).apply(image)

        backend.create_canvas.assert_called_once_with(463, 463, None)
        backend.decode.assert_called_once_with(b"original")
        backend.crop.assert_called_once_with("decoded", 101, 0, 463, 463)
        backend.paste.assert_called_once_with("canvas", "cropped", 0, 0)
        backend.encode.assert_called_once_with("pasted", "png")
        assert image.size == (463, 463)
        assert image.blob == b"encoded"
        assert image.transformed is True

    def test_center_x_uses_raw_y(self):
        backend = stub_backend()
        image = make_model(600, 100)

        Canvas.from_params(
            {"width": 400, "height": 300, "mode": "center-x", "x": 50, "y": 25},
            backend
        ).apply(image)

        backend.crop.assert_called_once_with("decoded", 100, 0, 400, 100)
        backend.paste.assert_called_once_with("canvas", "cropped", 0, 25)
        assert image.size == (400, 300)

    def test_no_crop_when_source_fits(self):
        backend = stub_backend()
        image = make_model(100, 50)

        Canvas.from_params({"width": 200, "height": 200, "x": 10, "y": 20}, backend).apply(image)

        backend.crop.assert_not_called()
        backend.paste.assert_called_once_with("canvas", "decoded", 10, 20)

    def test_background_color(self):
        backend = stub_backend()
        image = make_model(10, 10)

        Canvas.from_params({"width": 20, "height": 20, "bg": "fff"}, backend).apply(image)

        backend.parse_color.assert_called_once_with("fff")
        backend.create_canvas.assert_called_once_with(20, 20, (255, 255, 255, 255))

    def test_invalid_color_is_wrapped(self):
        backend = stub_backend()
        backend.parse_color.side_effect = ImageBackendError("Unable to parse color: nope")
        image = make_model(10, 10)

        with pytest.raises(TransformationError) as exc_info:
            Canvas.from_params({"width": 20, "height": 20, "bg": "nope"}, backend).apply(image)

        assert "Unable to parse color: nope" in exc_info.value.message
        assert exc_info.value.status_code == 400
        assert exc_info.value.transformation == "canvas"
        assert isinstance(exc_info.value.cause, ImageBackendError)
        backend.create_canvas.assert_not_called()
        # Model untouched on failure
        assert image.blob == b"original"
        assert image.size == (10, 10)
        assert image.transformed is False

    def test_zero_size_fails_at_backend(self):
        backend = stub_backend()
        backend.create_canvas.side_effect = ImageBackendError("Invalid canvas size: 0x10")

        transformation = Canvas.from_params({"width": "0", "height": "10"}, backend)
        with pytest.raises(TransformationError):
            transformation.apply(make_model(10, 10))

    def test_programmer_errors_are_not_wrapped(self):
        backend = stub_backend()
        backend.decode.side_effect = TypeError("bad call")

        with pytest.raises(TypeError):
            Canvas.from_params({"width": 1, "height": 1}, backend).apply(make_model(10, 10))


class TestRotate:
    """Test rotate transformation."""

    def test_missing_angle(self):
        backend = stub_backend()
        with pytest.raises(ValidationError) as exc_info:
            Rotate.from_params({"bg": "fff"}, backend)
        assert exc_info.value.field == "angle"
        assert backend.method_calls == []

    def test_dimensions_come_from_backend(self):
        backend = stub_backend()
        backend.rotate.return_value = "rotated"
        backend.size.return_value = (463, 665)
        image = make_model(665, 463)

        Rotate.from_params({"angle": "90", "bg": "fff"}, backend).apply(image)

        backend.rotate.assert_called_once_with("decoded", 90.0, (255, 255, 255, 255))
        backend.encode.assert_called_once_with("rotated", "png")
        assert image.size == (463, 665)

    def test_no_background(self):
        backend = stub_backend()
        backend.size.return_value = (10, 10)

        Rotate.from_params({"angle": 45.5}, backend).apply(make_model(10, 10))

        backend.parse_color.assert_not_called()
        assert backend.rotate.call_args == call("decoded", 45.5, None)


class TestFlip:
    """Test flip transformations."""

    def test_flip_horizontally(self):
        backend = stub_backend()
        backend.flip_horizontal.return_value = "flipped"
        image = make_model(30, 20)

        FlipHorizontally.from_params({}, backend).apply(image)

        backend.flip_horizontal.assert_called_once_with("decoded")
        backend.encode.assert_called_once_with("flipped", "png")
        assert image.size == (30, 20)
        assert image.transformed is True

    def test_flip_vertically(self):
        backend = stub_backend()
        image = make_model(30, 20)

        FlipVertically.from_params(None, backend).apply(image)

        backend.flip_vertical.assert_called_once_with("decoded")
        backend.flip_horizontal.assert_not_called()


class TestCompress:
    """Test compress transformation."""

    def test_missing_quality(self):
        backend = stub_backend()
        with pytest.raises(ValidationError) as exc_info:
            Compress.from_params({}, backend)
        assert exc_info.value.field == "quality"
        assert "quality" in exc_info.value.message
        assert backend.method_calls == []

    def test_compress(self):
        backend = stub_backend()
        image = make_model(30, 20, extension="jpg")

        Compress.from_params({"quality": "50"}, backend).apply(image)

        backend.encode.assert_called_once_with("decoded", "jpg", quality=50)
        assert image.size == (30, 20)
        assert image.blob == b"encoded"

    def test_out_of_range_quality_surfaces_backend_error(self):
        backend = stub_backend()
        backend.encode.side_effect = ImageBackendError("Invalid quality: 150")

        with pytest.raises(TransformationError) as exc_info:
            Compress.from_params({"quality": 150}, backend).apply(make_model())
        assert "Invalid quality: 150" in exc_info.value.message


class TestBorder:
    """Test border transformation."""

    def test_outbound_grows_image(self):
        backend = stub_backend()
        image = make_model(100, 50)

        Border.from_params({"width": 3, "height": 2, "color": "f00"}, backend).apply(image)

        backend.parse_color.assert_called_once_with("f00")
        backend.create_canvas.assert_called_once_with(106, 54, (255, 255, 255, 255))
        backend.paste.assert_called_once_with("canvas", "decoded", 3, 2)
        assert image.size == (106, 54)

    def test_inline_keeps_size(self):
        backend = stub_backend()
        image = make_model(100, 50)

        Border.from_params({"width": 3, "height": 2, "mode": "inline"}, backend).apply(image)

        backend.create_canvas.assert_called_once_with(100, 50, (255, 255, 255, 255))
        backend.crop.assert_called_once_with("decoded", 3, 2, 94, 46)
        backend.paste.assert_called_once_with("canvas", "cropped", 3, 2)
        assert image.size == (100, 50)

    def test_inline_border_covering_everything(self):
        backend = stub_backend()
        image = make_model(4, 4)

        Border.from_params({"width": 2, "height": 2, "mode": "inline"}, backend).apply(image)

        backend.crop.assert_not_called()
        backend.encode.assert_called_once_with("canvas", "png")

    def test_negative_width_rejected(self):
        with pytest.raises(ValidationError):
            Border.from_params({"width": -1}, stub_backend())


class TestCrop:
    """Test crop transformation."""

    def test_crop(self):
        backend = stub_backend()
        image = make_model(100, 100)

        Crop.from_params({"x": 10, "y": 20, "width": 30, "height": 40}, backend).apply(image)

        backend.crop.assert_called_once_with("decoded", 10, 20, 30, 40)
        assert image.size == (30, 40)

    def test_out_of_bounds(self):
        backend = stub_backend()
        image = make_model(100, 100)

        with pytest.raises(TransformationError) as exc_info:
            Crop.from_params({"x": 80, "width": 30, "height": 10}, backend).apply(image)

        assert exc_info.value.message == "Crop area is out of bounds"
        backend.decode.assert_not_called()
        assert image.transformed is False

    def test_missing_height(self):
        with pytest.raises(ValidationError) as exc_info:
            Crop.from_params({"width": 10}, stub_backend())
        assert exc_info.value.field == "height"


class TestResize:
    """Test resize and maxSize transformations."""

    def test_width_only_keeps_ratio(self):
        backend = stub_backend()
        image = make_model(200, 100)

        Resize.from_params({"width": "50"}, backend).apply(image)

        backend.resize.assert_called_once_with("decoded", 50, 25)
        assert image.size == (50, 25)

    def test_height_only_keeps_ratio(self):
        backend = stub_backend()
        image = make_model(200, 100)

        Resize.from_params({"height": 30}, backend).apply(image)

        backend.resize.assert_called_once_with("decoded", 60, 30)

    def test_requires_a_dimension(self):
        with pytest.raises(ValidationError) as exc_info:
            Resize.from_params({}, stub_backend())
        assert "Missing both width and height" in exc_info.value.message

    def test_max_size_shrinks(self):
        backend = stub_backend()
        image = make_model(665, 463)

        MaxSize.from_params({"width": 200, "height": 200}, backend).apply(image)

        # Width limit gives 200x139, which already fits the height limit
        backend.resize.assert_called_once_with("decoded", 200, 139)
        assert image.size == (200, 139)

    def test_max_size_height_limit(self):
        backend = stub_backend()
        image = make_model(463, 665)

        MaxSize.from_params({"height": 100}, backend).apply(image)

        backend.resize.assert_called_once_with("decoded", 70, 100)

    def test_max_size_noop_when_fitting(self):
        backend = stub_backend()
        image = make_model(100, 100)

        MaxSize.from_params({"width": 200}, backend).apply(image)

        assert backend.method_calls == []
        assert image.transformed is False


class TestDesaturate:
    """Test desaturate transformation."""

    def test_desaturate(self):
        backend = stub_backend()
        backend.desaturate.return_value = "gray"
        image = make_model(10, 10)

        Desaturate.from_params({}, backend).apply(image)

        backend.encode.assert_called_once_with("gray", "png")


class TestConvert:
    """Test convert transformation."""

    def test_convert_changes_extension(self):
        backend = stub_backend()
        image = make_model(10, 10)

        Convert.from_params({"type": "JPG"}, backend).apply(image)

        backend.encode.assert_called_once_with("decoded", "jpg")
        assert image.extension == "jpg"
        assert image.mime_type == "image/jpeg"

    def test_same_format_is_noop(self):
        backend = stub_backend()
        image = make_model(10, 10, extension="jpeg")

        Convert.from_params({"type": "jpg"}, backend).apply(image)

        assert backend.method_calls == []

    def test_unsupported_type(self):
        with pytest.raises(ValidationError) as exc_info:
            Convert.from_params({"type": "psd"}, stub_backend())
        assert exc_info.value.field == "type"
        assert "Unsupported image type: psd" in exc_info.value.message
