from abc_analyzer.inspectors import (
    CurvesInspector,
    FaceSetInspector,
    MaterialInspector,
    PolyMeshInspector,
    SubDInspector,
    XformInspector,
)
from abc_analyzer.models import ABSENT, PropertyKind
from fakes import (
    FakeCompound,
    FakeProperty,
    FakeSchema,
    array,
    compound,
    scalar,
)


def _by_name(summary):
    return {prop.name: prop for prop in summary.properties}


# -------------------------
# Property listings
# -------------------------

def test_poly_mesh_lists_properties_in_order():
    schema = FakeSchema(
        [array("P"), array(".faceIndices"), array("N"), compound("uv"), compound(".arbGeomParams")],
        getPositionsProperty=FakeProperty(5),
        getNormalsParam=FakeProperty(2),
        getUVsParam=FakeProperty(1),
        getArbGeomParams=FakeCompound(["Cd", "uv2"]),
    )
    summary = PolyMeshInspector().collect(schema)

    assert summary.label == "Mesh"
    assert [prop.index for prop in summary.properties] == [0, 1, 2, 3, 4]
    props = _by_name(summary)
    assert props["P"].sample_count == 5
    assert props["N"].sample_count == 2
    assert props["uv"].sample_count == 1
    assert props["uv"].kind is PropertyKind.COMPOUND
    assert props[".faceIndices"].role is None
    assert props[".faceIndices"].sample_count is None
    assert props[".arbGeomParams"].geom_params == ["Cd", "uv2"]


def test_st_is_treated_as_texture_coordinates():
    schema = FakeSchema([array("st")], getUVsParam=FakeProperty(7))
    assert _by_name(PolyMeshInspector().collect(schema))["st"].sample_count == 7


def test_malformed_positions_degrade_to_absent():
    schema = FakeSchema(
        [array("P"), array("N")],
        getPositionsProperty=RuntimeError("P is missing its sample index"),
        getNormalsParam=FakeProperty(3),
    )
    props = _by_name(PolyMeshInspector().collect(schema))
    assert props["P"].sample_count is None
    assert props["N"].sample_count == 3


def test_invalid_param_degrades_to_absent():
    schema = FakeSchema([array("N")], getNormalsParam=FakeProperty(3, valid=False))
    assert _by_name(PolyMeshInspector().collect(schema))["N"].sample_count is None


def test_missing_accessor_degrades_to_absent():
    schema = FakeSchema([array("P")])
    assert _by_name(CurvesInspector().collect(schema))["P"].sample_count is None


def test_broken_arb_geom_params_degrade_to_absent():
    schema = FakeSchema([compound(".arbGeomParams")], getArbGeomParams=FakeCompound(["Cd"], valid=False))
    prop = _by_name(PolyMeshInspector().collect(schema))[".arbGeomParams"]
    assert prop.role == "arb_geom_params"
    assert prop.geom_params is None


def test_curves_use_the_same_listing():
    schema = FakeSchema(
        [array("P"), array("N"), scalar("curveBasisAndType")],
        getPositionsProperty=FakeProperty(2),
        getNormalsParam=FakeProperty(2),
    )
    summary = CurvesInspector().collect(schema)
    assert summary.label == "Curves"
    assert [prop.sample_count for prop in summary.properties] == [2, 2, None]
    assert summary.properties[2].kind is PropertyKind.SCALAR


# -------------------------
# SubD
# -------------------------

def test_subd_reports_scheme_and_boundaries():
    schema = FakeSchema(
        [array("P"), array("N")],
        getPositionsProperty=FakeProperty(1),
        getNormalsParam=FakeProperty(9),
        getSubdivisionSchemeProperty=FakeProperty(1, value="catmull-clark"),
        getFaceVaryingInterpolateBoundaryProperty=FakeProperty(1, value=0),
        getFaceVaryingPropagateCornersProperty=FakeProperty(0),
        getInterpolateBoundaryProperty=RuntimeError("bad property"),
    )
    summary = SubDInspector().collect(schema)

    assert summary.label == "SubD"
    props = _by_name(summary)
    assert props["P"].sample_count == 1
    assert props["N"].role is None
    assert summary.fields == [
        ("Subdivision Scheme", "catmull-clark"),
        ("Face Varying Interpolate Boundary", "0"),
        ("Face Varying Propagate Corners", ABSENT),
        ("Interpolate Boundary", ABSENT),
    ]


# -------------------------
# Xform / FaceSet
# -------------------------

def test_xform_reports_samples_and_ops():
    summary = XformInspector().collect(FakeSchema(getNumSamples=3, getNumOps=2))
    assert summary.properties is None
    assert summary.fields == [("Sample Count", "3"), ("Number of Ops", "2")]


def test_xform_ops_failure_is_absent():
    summary = XformInspector().collect(FakeSchema(getNumSamples=1, getNumOps=RuntimeError("ops")))
    assert summary.fields == [("Sample Count", "1"), ("Number of Ops", ABSENT)]


def test_face_set_reports_only_sample_count():
    summary = FaceSetInspector().collect(FakeSchema([array(".faces")], getNumSamples=6))
    assert summary.properties is None
    assert summary.fields == [("Sample Count", "6")]


# -------------------------
# Material
# -------------------------

def _material_schema():
    shader_types = {"arnold": ["surface"], "renderman": ["bxdf"]}
    return FakeSchema(
        getTargetNames=list(shader_types),
        getShaderTypesForTarget=lambda target: shader_types[target],
        getShaderParameters=lambda target, shader: FakeCompound(["Kd", "Ks", "roughness"]),
    )


def test_default_material_inspector_reports_no_targets():
    summary = MaterialInspector().collect(_material_schema())
    assert summary.targets == []


def test_explicit_targets_are_summarized():
    summary = MaterialInspector(["arnold", "missing"]).collect(_material_schema())
    arnold, missing = summary.targets
    assert arnold.name == "arnold"
    assert [(b.name, b.parameter_count) for b in arnold.shader_types] == [("surface", 3)]
    assert missing.shader_types == []
