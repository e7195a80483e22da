import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import color_from_rgb, round_half_up


def _load_pixels(image_path, size=300):
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((size, size))
    return np.array(img).reshape(-1, 3)


def _cluster(image_path, n_colors):
    pixels = _load_pixels(image_path)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)
    return kmeans


def _center_to_color(center):
    return color_from_rgb(tuple(round_half_up(c) for c in center))


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering, most populated first"""
    kmeans = _cluster(image_path, n_colors)
    counts = np.bincount(kmeans.labels_, minlength=len(kmeans.cluster_centers_))
    order = np.argsort(-counts, kind="stable")
    return [_center_to_color(kmeans.cluster_centers_[i]) for i in order]


def extract_base_color(image_path, n_colors=8):
    """Pick a base color from an image: the center of its largest cluster.

    Returns:
        HSLColor of the dominant color
    """
    return extract_colors(image_path, n_colors)[0].hsl
