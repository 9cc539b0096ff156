"""Flask web application for SkillSwap."""

import logging
import os
from dataclasses import dataclass, field
from functools import wraps
from pathlib import Path
from threading import Lock

from flask import Flask, current_app, jsonify, request, session

import config
from skillswap.models import Direction, Profile
from skillswap.services import (
    AuthError,
    AuthService,
    ChatService,
    ChatServiceError,
    ChatStore,
    OnboardingForm,
    ProfileService,
    ProfileServiceError,
    ProfileStore,
    StoreError,
    SwipeSession,
    TradeAdvisor,
    start_discovery,
)
from skillswap.services.neighborhood_service import build_gallery, build_map
from skillswap.services.profile_service import welcome_message

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = config.SECRET_KEY


class RequestError(Exception):
    """Raised when a request body is not the JSON object an endpoint expects."""
    pass


@dataclass
class Services:
    """Everything the routes need, built once per app."""
    profiles: ProfileService
    auth: AuthService
    chat: ChatService
    # One swipe session per signed-in user; rebuilt whenever discovery is entered
    discovery: dict[str, SwipeSession] = field(default_factory=dict)
    discovery_lock: Lock = field(default_factory=Lock)
    max_discovery_sessions: int = config.MAX_DISCOVERY_SESSIONS

    def remember_session(self, user_id: str, swipe: SwipeSession) -> None:
        """Store ``swipe`` for ``user_id``, evicting the least recently started sessions."""
        with self.discovery_lock:
            self.discovery.pop(user_id, None)
            self.discovery[user_id] = swipe
            while len(self.discovery) > self.max_discovery_sessions:
                oldest = next(iter(self.discovery))
                del self.discovery[oldest]

    def forget_session(self, user_id: str) -> None:
        with self.discovery_lock:
            self.discovery.pop(user_id, None)


def init_services(flask_app, data_dir=None, *, llm_service=None, geocoder=None):
    """Wire stores and services into ``flask_app`` (tests pass fakes here)."""
    data_dir = Path(data_dir or config.DATA_DIR)
    store = ProfileStore(data_dir / "profiles.json")
    services = Services(
        profiles=ProfileService(store, geocoder=geocoder),
        auth=AuthService(data_dir / "accounts.json"),
        chat=ChatService(ChatStore(data_dir / "chats"), TradeAdvisor(llm_service)),
    )
    flask_app.extensions['skillswap'] = services
    return services


def services() -> Services:
    return current_app.extensions['skillswap']


def login_required(f):
    """Decorator to require login for API endpoints."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get('user_id'):
            return jsonify({'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function


def profile_required(f):
    """Decorator for endpoints that need a finished profile."""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        profile = services().profiles.store.get(session['user_id'])
        if profile is None:
            return jsonify({'error': 'Complete your profile first', 'onboarding': True}), 409
        return f(profile, *args, **kwargs)
    return decorated_function


def _other_user(user_id: str) -> Profile | None:
    return services().profiles.store.get(user_id)


def _json_body() -> dict:
    """The request's JSON object; an empty or missing body counts as ``{}``.

    Raises:
        RequestError: If the body is JSON but not an object
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RequestError('Request body must be a JSON object')
    return data


def _str_field(data: dict, key: str) -> str:
    """``data[key]`` as a string (missing means ``""``).

    Raises:
        RequestError: If the value is present but not a string
    """
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise RequestError(f"'{key}' must be a string")
    return value


@app.errorhandler(RequestError)
def handle_request_error(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(StoreError)
def handle_store_error(e):
    logger.error("[api] store error: %s", e)
    return jsonify({'error': 'Storage unavailable'}), 500


@app.route('/api/signup', methods=['POST'])
def signup():
    """Create an account; the client continues with onboarding."""
    data = _json_body()
    try:
        account = services().auth.sign_up(_str_field(data, 'email'), _str_field(data, 'password'))
    except AuthError as e:
        return jsonify({'error': str(e)}), 400

    services().forget_session(account.user_id)
    session['user_id'] = account.user_id
    session.permanent = True
    return jsonify({'success': True, 'user_id': account.user_id, 'onboarding': True})


@app.route('/api/login', methods=['POST'])
def login():
    """Handle login."""
    data = _json_body()
    try:
        account = services().auth.log_in(_str_field(data, 'email'), _str_field(data, 'password'))
    except AuthError as e:
        return jsonify({'error': str(e)}), 401

    # A new login starts without the previous discovery session
    services().forget_session(account.user_id)
    session['user_id'] = account.user_id
    session.permanent = True
    profile = services().profiles.store.get(account.user_id)
    return jsonify({
        'success': True,
        'user_id': account.user_id,
        'onboarding': profile is None,
        'profile': profile.to_dict() if profile else None,
    })


@app.route('/api/logout', methods=['POST'])
def logout():
    """Handle logout."""
    user_id = session.pop('user_id', None)
    if user_id:
        services().forget_session(user_id)
    return jsonify({'success': True})


@app.route('/api/profile', methods=['GET'])
@profile_required
def get_profile(me):
    return jsonify({'success': True, 'profile': me.to_dict()})


@app.route('/api/profile', methods=['POST'])
@login_required
def save_profile():
    """Finish onboarding (or edit the profile): geocode and save."""
    data = _json_body()
    try:
        form = OnboardingForm.from_dict(data)
        profile = services().profiles.complete_profile(session['user_id'], form)
    except ProfileServiceError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({
        'success': True,
        'profile': profile.to_dict(),
        'notification': welcome_message(profile),
    })


@app.route('/api/map', methods=['GET'])
@profile_required
def skill_map(me):
    profiles = services().profiles.store.get_all_profiles()
    return jsonify({'success': True, **build_map(me, profiles)})


@app.route('/api/gallery', methods=['GET'])
@profile_required
def gallery(me):
    profiles = services().profiles.store.get_all_profiles()
    return jsonify({'success': True, 'users': build_gallery(me, profiles)})


def _discovery_payload(swipe: SwipeSession) -> dict:
    current = swipe.current()
    return {
        'state': swipe.state.value,
        'cursor': swipe.cursor,
        'remaining': swipe.remaining,
        'candidate': current.to_dict() if current else None,
    }


@app.route('/api/discover', methods=['POST'])
@profile_required
def discover(me):
    """Enter discovery: rank everyone again and start a fresh session."""
    profiles = services().profiles.store.get_all_profiles()
    swipe = start_discovery(me, profiles)
    services().remember_session(me.id, swipe)
    return jsonify({'success': True, **_discovery_payload(swipe)})


@app.route('/api/discover/current', methods=['GET'])
@profile_required
def discover_current(me):
    swipe = services().discovery.get(me.id)
    if swipe is None:
        return jsonify({'error': 'No discovery session, POST /api/discover first'}), 404
    return jsonify({'success': True, **_discovery_payload(swipe)})


@app.route('/api/discover/decide', methods=['POST'])
@profile_required
def discover_decide(me):
    """Swipe the current candidate left (reject) or right (accept)."""
    swipe = services().discovery.get(me.id)
    if swipe is None:
        return jsonify({'error': 'No discovery session, POST /api/discover first'}), 404

    data = _json_body()
    raw_direction = data.get('direction')
    try:
        if not isinstance(raw_direction, str):
            raise ValueError(raw_direction)
        direction = Direction(raw_direction.lower())
    except ValueError:
        return jsonify({'error': "direction must be 'accept' or 'reject'"}), 400

    # decide and the payload read must see the same cursor
    with services().discovery_lock:
        decision = swipe.decide(direction)
        payload = _discovery_payload(swipe)

    notification = None
    if decision is not None and decision.direction is Direction.ACCEPT:
        services().profiles.store.add_match(me.id, decision.candidate_id)
        matched = swipe.find(decision.candidate_id)
        notification = f"It's a Match! Message {matched.profile.display_name} now."

    return jsonify({
        'success': True,
        'decision': decision.to_dict() if decision else None,
        'notification': notification,
        **payload,
    })


@app.route('/api/chat/<other_id>', methods=['GET'])
@profile_required
def chat_history(me, other_id):
    other = _other_user(other_id)
    if other is None:
        return jsonify({'error': 'User not found'}), 404
    messages = services().chat.history(me.id, other.id)
    return jsonify({'success': True, 'messages': [m.to_dict() for m in messages]})


@app.route('/api/chat/<other_id>', methods=['POST'])
@profile_required
def chat_send(me, other_id):
    other = _other_user(other_id)
    if other is None:
        return jsonify({'error': 'User not found'}), 404

    data = _json_body()
    try:
        message = services().chat.send(me, other.id, _str_field(data, 'text'))
    except ChatServiceError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'success': True, 'message': message.to_dict()})


@app.route('/api/chat/<other_id>/trade-plan', methods=['POST'])
@profile_required
def chat_trade_plan(me, other_id):
    """Ask the AI advisor for a fair trade and post it into the chat."""
    other = _other_user(other_id)
    if other is None:
        return jsonify({'error': 'User not found'}), 404
    message = services().chat.request_trade_plan(me, other)
    return jsonify({'success': True, 'message': message.to_dict()})


init_services(app)


if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if config.LLM_PROVIDER == 'gemini' and not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY or GOOGLE_API_KEY environment variable not set")

    port = int(os.environ.get('PORT', 5000))
    app.run(debug=False, host='0.0.0.0', port=port)
