"""
Authentication Routes

Handles user registration, login and the post-login dashboard.
"""

from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash

from webapp.services.auth_service import register_user, authenticate_user, SIGNUP_SUCCESS
from utils.timestamps import format_timestamp

auth_bp = Blueprint('auth', __name__)


def get_repository():
    return current_app.extensions['user_repository']


@auth_bp.route('/', methods=['GET', 'POST'])
def login():
    """Login page. A ?email= parameter pre-fills the email field."""
    if request.method == 'POST':
        email = request.form.get('loginEmail', '')
        password = request.form.get('loginPassword', '')

        user, error = authenticate_user(get_repository(), email, password)
        if error:
            flash(error, 'error')
            return render_template('login.html', email=email.strip())

        return redirect(url_for('auth.dashboard'))

    return render_template('login.html', email=request.args.get('email') or '')


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """Registration page."""
    if request.method == 'POST':
        name = request.form.get('fullName', '')
        email = request.form.get('signupEmail', '')
        phone = request.form.get('phone', '')

        user, error = register_user(
            get_repository(),
            name,
            email,
            phone,
            request.form.get('signupPassword', ''),
            request.form.get('confirmPassword', ''),
        )
        if error:
            flash(error, 'error')
            # Passwords are never echoed back into the form
            return render_template('signup.html',
                                   name=name.strip(),
                                   email=email.strip(),
                                   phone=phone.strip())

        flash(SIGNUP_SUCCESS, 'success')
        return redirect(url_for('auth.login'))

    return render_template('signup.html', name='', email='', phone='')


@auth_bp.route('/dashboard')
def dashboard():
    """Dashboard for the user in the session marker."""
    user = get_repository().get_logged_user()
    if not user:
        flash('Please log in first.', 'error')
        return redirect(url_for('auth.login'))

    return render_template('dashboard.html',
                           user=user,
                           joined=format_timestamp(user.get('createdAt')))
