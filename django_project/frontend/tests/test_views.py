# coding=utf-8
"""
Biodiversity Hub.

.. note:: Unit test for Views.
"""

from django.test import Client, TestCase
from django.urls import reverse

from core.factories import UserF


class TestHomeView(TestCase):
    """Test HomeView class."""

    def test_home_view_anonymous(self):
        """Test Home View redirects to login."""
        c = Client()
        response = c.get('/')
        self.assertRedirects(response, reverse('login'))

    def test_home_view(self):
        """Test Home View redirects to species list."""
        c = Client()
        c.force_login(UserF.create())
        response = c.get('/')
        self.assertRedirects(response, reverse('species:list'))


class TestLayout(TestCase):
    """Test the layout of the pages."""

    def test_login_page(self):
        """Test login page uses the layout."""
        c = Client()
        response = c.get(reverse('login'))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.has_header('Content-Type'))
        self.assertIn('text/html', response.headers['Content-Type'])
        self.assertIn('hub_base_context', response.context)
        self.assertFalse(
            response.context['hub_base_context']['is_authenticated']
        )
        self.assertContains(response, 'Biodiversity Hub')
        self.assertContains(response, 'theme-toggle')

    def test_auth_status(self):
        """Test navbar shows the user."""
        user = UserF.create(username='jane')
        c = Client()
        c.force_login(user)
        response = c.get(reverse('species:list'))
        context = response.context['hub_base_context']
        self.assertTrue(context['is_authenticated'])
        self.assertEqual(context['username'], 'jane')
        self.assertContains(response, 'Log out')

    def test_login(self):
        """Test login with username and password."""
        UserF.create(username='jane')
        c = Client()
        response = c.post(
            reverse('login'), {'username': 'jane', 'password': 'password'}
        )
        self.assertRedirects(response, reverse('species:list'))
