import html
import json

import streamlit as st
import streamlit.components.v1 as components

import api_client
from api_client import BACKEND_URL
from form_validation import build_place_payload, validate_place_form
from place_filters import STOCKHOLM_CENTER, CategoryFilter, with_fallback_coordinates

# Page configuration
st.set_page_config(
    page_title="Stockholm Places",
    page_icon="📍",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .place-card {
        padding: 1rem;
        border-radius: 0.5rem;
        margin: 0.5rem 0;
        border-left: 4px solid #1E88E5;
        background-color: #f5f8fc;
    }
    .category-badge {
        display: inline-block;
        padding: 0.1rem 0.6rem;
        border-radius: 1rem;
        background-color: #DBEAFE;
        color: #1E40AF;
        font-size: 0.75rem;
    }
</style>
""", unsafe_allow_html=True)

LOAD_ERROR = "Error loading places. Please refresh the page."

# Initialize session state
if "success_message" not in st.session_state:
    st.session_state.success_message = None

if "category_filter" not in st.session_state:
    st.session_state.category_filter = CategoryFilter.from_response(api_client.fetch_categories())

if "form_errors" not in st.session_state:
    st.session_state.form_errors = {}


def render_place_card(place: dict):
    location = place.get("location") or {}
    st.markdown(f"""
    <div class="place-card">
        <b>{html.escape(place.get("name") or "")}</b>
        <span class="category-badge">{html.escape(place.get("category") or "")}</span>
        <p>{html.escape(place.get("description") or "")}</p>
        <small>📍 {html.escape(location.get("address") or "")}</small><br>
        <small>Added by {html.escape(place.get("submittedBy") or "Anonymous")}</small>
    </div>
    """, unsafe_allow_html=True)


def render_map(places: list[dict]):
    """Google map with one marker per place; the script comes from the backend loader."""
    markers = [
        {
            "name": p.get("name") or "",
            "category": p.get("category") or "",
            "lat": p["location"]["coordinates"]["lat"],
            "lng": p["location"]["coordinates"]["lng"],
        }
        for p in places
    ]
    components.html(f"""
    <div id="map" style="height: 480px; width: 100%;"></div>
    <script src="{BACKEND_URL}/maps/script"></script>
    <script>
      const markers = {json.dumps(markers)};
      function initMap() {{
        const map = new google.maps.Map(document.getElementById("map"), {{
          center: {json.dumps(STOCKHOLM_CENTER)},
          zoom: 12,
        }});
        const bounds = new google.maps.LatLngBounds();
        markers.forEach((m) => {{
          new google.maps.Marker({{ position: {{ lat: m.lat, lng: m.lng }}, map, title: m.name + " (" + m.category + ")" }});
          bounds.extend({{ lat: m.lat, lng: m.lng }});
        }});
        if (markers.length > 0) {{
          map.fitBounds(bounds);
          google.maps.event.addListenerOnce(map, "bounds_changed", () => {{
            if (map.getZoom() > 15) map.setZoom(15);
          }});
        }}
      }}
      function waitForMaps() {{
        if (window.google && google.maps && google.maps.Map) {{ initMap(); }}
        else {{ setTimeout(waitForMaps, 100); }}
      }}
      waitForMaps();
    </script>
    """, height=500)


def add_place_form(categories: list[str]):
    with st.expander("➕ Add New Place", expanded=False):
        st.caption("Share your favorite Stockholm spot with the community")
        errors = st.session_state.form_errors
        with st.form("add_place", clear_on_submit=False):
            name = st.text_input("Name")
            if errors.get("name"):
                st.error(errors["name"])
            category = st.selectbox("Category", [""] + categories)
            if errors.get("category"):
                st.error(errors["category"])
            address = st.text_input("Address")
            if errors.get("address"):
                st.error(errors["address"])
            description = st.text_area("Description")
            st.caption(f"{len(description)}/500")
            if errors.get("description"):
                st.error(errors["description"])
            submitted = st.form_submit_button("Add Place")

        if submitted:
            errors = validate_place_form(name, description, category, address)
            st.session_state.form_errors = errors
            if errors:
                st.rerun()

            with st.spinner("Adding place..."):
                result = api_client.create_place(build_place_payload(name, description, category, address))
            if "error" in result:
                st.error("Failed to add place. Please try again.")
            else:
                st.session_state.success_message = "Your place has been added successfully!"
                st.rerun()


# Header
st.markdown('<div class="main-header">📍 Stockholm Places</div>', unsafe_allow_html=True)
st.markdown("<p style='text-align: center; color: #666;'>Discover and share favorite spots around Stockholm</p>", unsafe_allow_html=True)

category_filter: CategoryFilter = st.session_state.category_filter

# Sidebar
with st.sidebar:
    st.header("⚙️ Filters")

    if not api_client.check_backend_health():
        st.warning("⚠️ Backend Disconnected")

    search = st.text_input("🔍 Search", placeholder="Name, description or address")
    category_choice = st.selectbox("📂 Category", ["all"] + category_filter.categories)
    view = st.radio("View", ["List", "Map"], horizontal=True)

if st.session_state.success_message:
    st.success(st.session_state.success_message)
    st.session_state.success_message = None

add_place_form(category_filter.categories)

response = api_client.fetch_places(category=category_choice, search=search or None)
if "error" in response:
    st.error(LOAD_ERROR)
    if st.button("🔄 Reload"):
        st.rerun()
    st.stop()

places = response.get("places", [])

# Category checkboxes with per-category counts
with st.sidebar:
    st.subheader("Categories")
    for category in category_filter.categories:
        checked = st.checkbox(
            f"{category} ({CategoryFilter.count_for(places, category)})",
            value=category_filter.is_selected(category),
            key=f"category_{category}",
        )
        category_filter.toggle(category, checked)

visible = category_filter.visible(places)
st.write(f"Showing **{len(visible)}** of {len(places)} places")

if view == "Map":
    render_map(with_fallback_coordinates(visible))
elif not visible:
    st.info("No places found. Be the first to add one!")
else:
    columns = st.columns(3)
    for index, place in enumerate(visible):
        with columns[index % 3]:
            render_place_card(place)
            if st.button("🗑️ Delete", key=f"delete_{place.get('_id')}"):
                result = api_client.delete_place(place["_id"])
                if "error" in result:
                    st.error(f"❌ {result['error']}")
                else:
                    st.session_state.success_message = "Place deleted successfully!"
                    st.rerun()

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI, MongoDB & Google Maps | Made with ❤️ using Streamlit</small>
</div>
""", unsafe_allow_html=True)
