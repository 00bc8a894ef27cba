"""
Favorite Samsung Journey

FLOW OVERVIEW
- open_signin()         → load /signin and wait for the Next.js root container.
- login()               → pick username/password from the react-select dropdowns,
                          click login, wait for the username marker. If the marker
                          never shows, surface the page's error banner when there
                          is one, else the original timeout.
- apply_brand_filter()  → tick the Samsung checkbox, wait for the spinner to go away.
- find_product()        → wait for the product title after filtering.
- favorite_product()    → click the heart and confirm its 'clicked' state.
- verify_favourites()   → open Favourites, check the product is the only item.
"""

import logging
from typing import Optional

from selenium.common.exceptions import WebDriverException

from ..config.config import StepTimeouts
from ..errors import InteractionError, WaitTimeoutError
from ..models.locator import Locator, xpath_literal

DEMO_USERNAME = 'demouser'
DEMO_PASSWORD = 'testingisfun99'
BRAND = 'Samsung'
PRODUCT = 'Galaxy S20+'


class BstackDemoLocators:
    """Selectors for www.bstackdemo.com"""

    PAGE_ROOT = Locator.by_id('__next')
    USERNAME_DROPDOWN = Locator.by_id('username')
    PASSWORD_DROPDOWN = Locator.by_id('password')
    LOGIN_BUTTON = Locator.by_id('login-btn', 'Login button')
    LOGIN_ERROR = Locator.by_css('.api-error, .error-message, [role="alert"]', 'login error banner')
    SPINNER = Locator.by_css('.spinner', 'product loading spinner')
    FAVOURITES_LINK = Locator.by_id('favourites', 'Favourites link')
    SHELF_ITEM = Locator.by_css('.shelf-item', 'shelf item')

    @staticmethod
    def signed_in_user(username: str) -> Locator:
        return Locator.by_text_contains(username, tag='span', description=f"signed-in user '{username}'")

    @staticmethod
    def brand_filter(brand: str) -> Locator:
        return Locator.by_xpath(
            f"//label[./input[@value={xpath_literal(brand)}]]/span[@class='checkmark']",
            f"'{brand}' filter checkbox",
        )

    @staticmethod
    def product_title(name: str) -> Locator:
        return Locator.by_text(name, tag='p', description=f"product '{name}'")

    @staticmethod
    def _shelf_item_xpath(name: str) -> str:
        return f"//div[contains(@class, 'shelf-item') and .//p[text()={xpath_literal(name)}]]"

    @classmethod
    def favorite_button(cls, name: str) -> Locator:
        return Locator.by_xpath(
            cls._shelf_item_xpath(name)
            + "//button[contains(@class, 'MuiIconButton-root') and .//*[local-name()='svg']]",
            f"favorite button for '{name}'",
        )

    @classmethod
    def favorited_button(cls, name: str) -> Locator:
        return Locator.by_xpath(
            cls._shelf_item_xpath(name) + "//button[contains(@class, 'clicked')]",
            f"favorited state for '{name}'",
        )


class FavoriteSamsungJourney:
    """Login → filter → favorite → verify favourites on bstackdemo.com"""

    name = 'User can log in, favorite a Samsung phone, and find it in favorites'
    success_reason = 'User was able to log in, favorite an item, and verify it.'

    def __init__(self, session, waiter, interactions, config, timeouts: Optional[StepTimeouts] = None,
                 username: str = DEMO_USERNAME, password: str = DEMO_PASSWORD,
                 brand: str = BRAND, product: str = PRODUCT):
        self.session = session
        self.waiter = waiter
        self.interactions = interactions
        self.config = config
        self.timeouts = timeouts or StepTimeouts()
        self.username = username
        self.password = password
        self.brand = brand
        self.product = product
        self.logger = logging.getLogger(__name__)

    def open_signin(self) -> None:
        self.interactions.navigate_and_verify(self.config.SIGNIN_URL, BstackDemoLocators.PAGE_ROOT)
        self.interactions.settle()

    def login(self) -> str:
        """
        Sign in through the dropdowns and wait for the signed-in marker.

        Returns:
            Text of the signed-in marker

        Raises:
            InteractionError: the page showed a login error banner
            WaitTimeoutError: no marker and no banner text
        """
        self.logger.info("Starting login process...")
        self.interactions.select_dropdown_option(BstackDemoLocators.USERNAME_DROPDOWN, self.username)
        self.interactions.select_dropdown_option(BstackDemoLocators.PASSWORD_DROPDOWN, self.password)
        self.interactions.click_when_ready(BstackDemoLocators.LOGIN_BUTTON)

        marker = BstackDemoLocators.signed_in_user(self.username)
        try:
            self.waiter.element_located(
                marker, self.timeouts.login_marker,
                f"User ('{self.username}') text not found on dashboard after login. Login likely failed."
            )
        except WaitTimeoutError:
            banner_text = self._login_error_text()
            if banner_text:
                raise InteractionError(f'Login failed with error: "{banner_text}"', stage='login')
            raise

        text = self.interactions.verify_text_present(marker, self.username)
        self.logger.info(f"Login successful! User '{self.username}' is displayed.")
        self.interactions.settle(self.timeouts.post_login_settle)
        return text

    def _login_error_text(self) -> str:
        try:
            banner = self.session.find(BstackDemoLocators.LOGIN_ERROR)
            return (banner.text or '').strip()
        except WebDriverException:
            return ''

    def apply_brand_filter(self) -> None:
        self.logger.info(f"Applying '{self.brand}' filter...")
        self.interactions.click_when_ready(BstackDemoLocators.brand_filter(self.brand))
        self.waiter.element_absent(
            BstackDemoLocators.SPINNER, self.timeouts.spinner,
            "Product loading spinner did not disappear after filtering."
        )
        self.logger.info(f"Products filtered. Waiting for '{self.product}' to appear...")

    def find_product(self):
        element = self.waiter.element_located(
            BstackDemoLocators.product_title(self.product), self.timeouts.locate,
            f"{self.product} product name not found after {self.brand} filter. "
            "Filter might not have worked or item is missing."
        )
        self.logger.info(f"Found '{self.product}' product.")
        return element

    def favorite_product(self) -> None:
        self.interactions.click_and_confirm_state_change(
            BstackDemoLocators.favorite_button(self.product),
            BstackDemoLocators.favorited_button(self.product),
        )
        self.logger.info("Favorite action confirmed visually.")
        self.interactions.settle(self.timeouts.post_favorite_settle)

    def verify_favourites(self) -> None:
        self.logger.info("Navigating to the 'Favourites' page...")
        self.interactions.click_when_ready(BstackDemoLocators.FAVOURITES_LINK)
        # Located again on the new page; the pre-navigation title is stale by now.
        self.interactions.verify_text_present(
            BstackDemoLocators.product_title(self.product), self.product,
            timeout=self.timeouts.favourites_item,
        )
        self.logger.info(f"Successfully found '{self.product}' on the Favorites page.")
        self.interactions.verify_count(BstackDemoLocators.SHELF_ITEM, 1)
        self.logger.info(f"Confirmed: '{self.product}' is the only item in favorites.")

    def run(self) -> None:
        self.open_signin()
        self.login()
        self.apply_brand_filter()
        self.find_product()
        self.favorite_product()
        self.verify_favourites()
