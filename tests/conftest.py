#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: FlatGeobuf Inspector (FGBI)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
Pytest configuration and shared fixtures for the FGBI test suite.

This module provides:
- Shared HeaderRecord fixtures for the view state tests
- Mock FlatGeobuf files written with GDAL for reader tests

Fixtures are organized by scope:
- session: Created once per test session (expensive setup)
- function: Created for each test function (default)

Example:
    >>> def test_using_fixture(sample_header):
    ...     '''Test using the sample_header fixture.'''
    ...     assert sample_header.column_count == 5
"""

import pytest
from osgeo import ogr, osr

# pythonpath is configured in pyproject.toml to include project root
from fgbinspect.utils.data_models import BoundingBox, ColumnDescriptor, CrsDescriptor, HeaderRecord
from tests.fixtures.mock_flatgeobuf_factory import MockFlatGeobuf


# =============================================================================
# Session-scope Fixtures (Created once per test session)
# =============================================================================

@pytest.fixture(scope="session")
def temp_dir(tmp_path_factory):
    """
    Create a temporary directory for the entire test session.

    Returns:
        Path: Path to temporary directory
    """
    return tmp_path_factory.mktemp("fgbinspect_tests")


@pytest.fixture(scope="session")
def points_fgb(temp_dir):
    """
    A small point layer in EPSG:4326 with three attribute columns.

    Returns:
        Path: Path to the written .fgb file
    """
    return MockFlatGeobuf(layer_name='points', crs='EPSG:4326').save_to_file(temp_dir / "points.fgb")


@pytest.fixture(scope="session")
def mercator_fgb(temp_dir):
    """
    A point layer in Web Mercator, without a spatial index.

    Returns:
        Path: Path to the written .fgb file
    """
    mock = MockFlatGeobuf(
        layer_name='mercator',
        crs='EPSG:3857',
        points=[(-1113194.9, -557305.3), (1113194.9, 557305.3)],
        spatial_index=False,
    )
    return mock.save_to_file(temp_dir / "mercator.fgb")


# =============================================================================
# Module-scope Fixtures (Created once per test module)
# =============================================================================

@pytest.fixture(scope="module")
def sample_wkt_geographic():
    """
    WKT string for WGS 84 geographic coordinate system.

    Returns:
        str: WKT string for EPSG:4326
    """
    srs = osr.SpatialReference()
    srs.ImportFromEPSG(4326)
    return srs.ExportToWkt()


@pytest.fixture(scope="module")
def sample_wkt_projected():
    """
    WKT string for UTM Zone 10N projected coordinate system.

    Returns:
        str: WKT string for EPSG:32610
    """
    srs = osr.SpatialReference()
    srs.ImportFromEPSG(32610)
    return srs.ExportToWkt()


# =============================================================================
# Function-scope Fixtures (Created for each test)
# =============================================================================

@pytest.fixture
def sample_columns():
    """
    Five attribute columns with mixed flags.

    Returns:
        Tuple[ColumnDescriptor, ...]: The schema
    """
    return (
        ColumnDescriptor(name='fid', type='Long', nullable=False, primary_key=True, unique=True),
        ColumnDescriptor(name='name', type='String', description='Feature name'),
        ColumnDescriptor(name='height', type='Double', description='Height above ground'),
        ColumnDescriptor(name='kind', type='String', primary_key=False),
        ColumnDescriptor(name='updated', type='DateTime'),
    )


@pytest.fixture
def sample_crs():
    return CrsDescriptor(org='EPSG', code=3857, name='WGS 84 / Pseudo-Mercator')


@pytest.fixture
def sample_header(sample_columns, sample_crs):
    """
    A complete header in Web Mercator.

    Returns:
        HeaderRecord: Header with five columns, a CRS and an extent
    """
    return HeaderRecord(
        name='buildings',
        description='Building footprints',
        title='Buildings',
        features_count=1250,
        geometry_type='MultiPolygon',
        index_node_size=16,
        has_z=False,
        has_m=False,
        has_t=None,
        has_tm=None,
        columns=sample_columns,
        crs=sample_crs,
        envelope=BoundingBox(-1113194.9, -557305.3, 1113194.9, 557305.3),
        metadata='{"source": "survey", "licence": "CC-BY"}',
    )


@pytest.fixture
def header_no_crs(sample_columns):
    return HeaderRecord(
        name='no_crs',
        features_count=3,
        geometry_type='Point',
        columns=sample_columns,
        envelope=BoundingBox(-10.0, -5.0, 10.0, 5.0),
    )


@pytest.fixture
def header_no_extent(sample_crs):
    return HeaderRecord(name='no_extent', geometry_type='Point', crs=sample_crs)


@pytest.fixture
def header_empty_schema():
    return HeaderRecord(
        name='geometry_only',
        geometry_type='Point',
        crs=CrsDescriptor(org='EPSG', code=4326),
        envelope=BoundingBox(0.0, 0.0, 1.0, 1.0),
    )


@pytest.fixture
def polygon_mock():
    """A polygon layer mock with header text."""
    return MockFlatGeobuf(
        layer_name='parcels',
        crs='EPSG:4326',
        geometry_type=ogr.wkbPolygon,
        title='Parcels',
        description='Cadastral parcels',
        metadata={'source': 'county'},
    )
