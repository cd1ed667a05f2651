import copy

from gedcom_chart.chart.images import file_name, filter_image, filter_images, is_image_file


def test_file_name_is_last_path_segment():
    assert file_name("http://example.com/a/b/photo.jpg") == "photo.jpg"
    assert file_name("C:\\Photos\\scan.png") == "scan.png"
    assert file_name("mixed/dir\\file.gif") == "file.gif"
    assert file_name("plain.jpg") == "plain.jpg"


def test_is_image_file_is_case_insensitive():
    assert is_image_file("a.JPG")
    assert is_image_file("a.png")
    assert is_image_file("a.gif")
    assert not is_image_file("a.jpeg")
    assert not is_image_file("a.pdf")


def test_supplied_image_replaces_url_and_keeps_title():
    indi = {
        "id": "I1",
        "images": [{"url": "file:///C:/pics/photo.jpg", "title": "Portrait"}],
    }

    result = filter_image(indi, {"photo.jpg": "data:image/jpeg;base64,AAAA"})

    assert result["images"] == [{"url": "data:image/jpeg;base64,AAAA", "title": "Portrait"}]


def test_supplied_image_wins_over_extension_check():
    indi = {"id": "I1", "images": [{"url": "scans/record.tiff"}]}
    result = filter_image(indi, {"record.tiff": "blob:1"})
    assert result["images"] == [{"url": "blob:1"}]


def test_remote_images_filtered_by_scheme_and_extension():
    kept_http = {"url": "http://example.com/a.jpg"}
    kept_https = {"url": "https://example.com/a.PNG", "title": "A"}
    indi = {
        "id": "I1",
        "images": [
            {"url": "ftp://example.com/a.jpg"},
            kept_http,
            {"url": "http://example.com/document.pdf"},
            {"url": "local/photo.gif"},
            {"url": "HTTP://example.com/upper.jpg"},
            kept_https,
        ],
    }

    result = filter_image(indi, {})

    assert result["images"] == [kept_http, kept_https]
    assert result["images"][0] is kept_http


def test_filter_image_does_not_modify_input():
    images = [{"url": "ftp://example.com/a.jpg"}, {"url": "x/photo.jpg", "title": "T"}]
    indi = {"id": "I1", "images": images}
    snapshot = copy.deepcopy(indi)

    result = filter_image(indi, {"photo.jpg": "data:new"})

    assert indi == snapshot
    assert result is not indi
    assert result["images"] is not images


def test_individual_without_images_is_returned_as_is():
    indi = {"id": "I1"}
    assert filter_image(indi, {"a.jpg": "x"}) is indi


def test_filter_images_covers_every_individual():
    data = {
        "individuals": [
            {"id": "I1", "images": [{"url": "ftp://x/a.jpg"}]},
            {"id": "I2", "images": [{"url": "http://x/b.gif"}]},
        ],
        "families": [{"id": "F1"}],
    }

    result = filter_images(data)

    assert result["individuals"][0]["images"] == []
    assert result["individuals"][1]["images"] == [{"url": "http://x/b.gif"}]
    assert result["families"] is data["families"]
